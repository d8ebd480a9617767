"""
BloodLink - Blood Donation Coordination
Flask Backend Application
Donor directory, blood requests, emergency alerts and blood facts,
persisted to CSV files
"""

import logging

from flask import Blueprint, Flask, current_app, jsonify, request

import config
from storage import BloodLinkStorage, StorageError
from validators import (ValidationError, validate_availability, validate_blood_request,
                        validate_donor, validate_emergency_alert)

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')

# Failures that come from the storage layer rather than the client
STORAGE_FAILURES = (OSError, StorageError)

# ============== HELPER FUNCTIONS ==============

def get_storage():
    return current_app.extensions['bloodlink_storage']

def parse_id(raw):
    """Integer id from a URL segment, or None unless it is plain ASCII digits"""
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)

def error_response(message, status):
    return jsonify({'message': message}), status

def records(entities):
    return jsonify([e.to_record() for e in entities])

# ============== DONOR ROUTES ==============

@api.route('/donors')
def list_donors():
    """All donors in registration order"""
    try:
        donors = get_storage().get_all_donors()
    except STORAGE_FAILURES:
        logger.exception("Error fetching donors")
        return error_response('Failed to fetch donors', 500)
    return records(donors)

@api.route('/donors/filter')
def filter_donors():
    """Donor directory search by blood group, city and availability"""
    blood_group = request.args.get('bloodGroup') or None
    city = request.args.get('city') or None
    availability = request.args.get('availability')
    is_available = None
    if availability:
        is_available = availability == 'available'

    try:
        donors = get_storage().filter_donors(
            blood_group=blood_group, city=city, is_available=is_available)
    except STORAGE_FAILURES:
        logger.exception("Error filtering donors")
        return error_response('Failed to filter donors', 500)
    return records(donors)

@api.route('/donors/<donor_id>')
def get_donor(donor_id):
    donor_id = parse_id(donor_id)
    if donor_id is None:
        return error_response('Invalid donor ID', 400)

    try:
        donor = get_storage().get_donor(donor_id)
    except STORAGE_FAILURES:
        logger.exception("Error fetching donor")
        return error_response('Failed to fetch donor', 500)

    if donor is None:
        return error_response('Donor not found', 404)
    return jsonify(donor.to_record())

@api.route('/donors', methods=['POST'])
def create_donor():
    """Donor registration"""
    try:
        values = validate_donor(request.get_json(silent=True))
    except ValidationError as e:
        return error_response(str(e), 400)

    try:
        donor = get_storage().create_donor(values)
    except STORAGE_FAILURES:
        logger.exception("Error creating donor")
        return error_response('Failed to create donor', 500)
    return jsonify(donor.to_record()), 201

@api.route('/donors/<donor_id>/availability', methods=['PATCH'])
def update_donor_availability(donor_id):
    donor_id = parse_id(donor_id)
    if donor_id is None:
        return error_response('Invalid donor ID', 400)

    try:
        changes = validate_availability(request.get_json(silent=True))
    except ValidationError as e:
        return error_response(str(e), 400)

    try:
        donor = get_storage().update_donor(donor_id, changes)
    except STORAGE_FAILURES:
        logger.exception("Error updating donor availability")
        return error_response('Failed to update donor availability', 500)

    if donor is None:
        return error_response('Donor not found', 404)
    return jsonify(donor.to_record())

# ============== BLOOD REQUEST ROUTES ==============

@api.route('/blood-requests')
def list_blood_requests():
    try:
        blood_requests = get_storage().get_all_blood_requests()
    except STORAGE_FAILURES:
        logger.exception("Error fetching blood requests")
        return error_response('Failed to fetch blood requests', 500)
    return records(blood_requests)

@api.route('/blood-requests/active')
def list_active_blood_requests():
    """Requests that are not fulfilled yet"""
    try:
        blood_requests = get_storage().get_active_blood_requests()
    except STORAGE_FAILURES:
        logger.exception("Error fetching active blood requests")
        return error_response('Failed to fetch active blood requests', 500)
    return records(blood_requests)

@api.route('/blood-requests/<request_id>')
def get_blood_request(request_id):
    request_id = parse_id(request_id)
    if request_id is None:
        return error_response('Invalid blood request ID', 400)

    try:
        blood_request = get_storage().get_blood_request(request_id)
    except STORAGE_FAILURES:
        logger.exception("Error fetching blood request")
        return error_response('Failed to fetch blood request', 500)

    if blood_request is None:
        return error_response('Blood request not found', 404)
    return jsonify(blood_request.to_record())

@api.route('/blood-requests', methods=['POST'])
def create_blood_request():
    try:
        values = validate_blood_request(request.get_json(silent=True))
    except ValidationError as e:
        return error_response(str(e), 400)

    try:
        blood_request = get_storage().create_blood_request(values)
    except STORAGE_FAILURES:
        logger.exception("Error creating blood request")
        return error_response('Failed to create blood request', 500)
    return jsonify(blood_request.to_record()), 201

@api.route('/blood-requests/<request_id>/fulfill', methods=['PATCH'])
def fulfill_blood_request(request_id):
    request_id = parse_id(request_id)
    if request_id is None:
        return error_response('Invalid blood request ID', 400)

    try:
        blood_request = get_storage().mark_blood_request_fulfilled(request_id)
    except STORAGE_FAILURES:
        logger.exception("Error marking blood request as fulfilled")
        return error_response('Failed to mark blood request as fulfilled', 500)

    if blood_request is None:
        return error_response('Blood request not found', 404)
    return jsonify(blood_request.to_record())

# ============== EMERGENCY ALERTS & BLOOD FACTS ==============

@api.route('/emergency-alerts/active')
def list_active_emergency_alerts():
    try:
        alerts = get_storage().get_active_emergency_alerts()
    except STORAGE_FAILURES:
        logger.exception("Error fetching active emergency alerts")
        return error_response('Failed to fetch active emergency alerts', 500)
    return records(alerts)

@api.route('/emergency-alerts', methods=['POST'])
def create_emergency_alert():
    try:
        values = validate_emergency_alert(request.get_json(silent=True))
    except ValidationError as e:
        return error_response(str(e), 400)

    try:
        alert = get_storage().create_emergency_alert(values)
    except STORAGE_FAILURES:
        logger.exception("Error creating emergency alert")
        return error_response('Failed to create emergency alert', 500)
    return jsonify(alert.to_record()), 201

@api.route('/blood-facts')
def list_blood_facts():
    try:
        facts = get_storage().get_all_blood_facts()
    except STORAGE_FAILURES:
        logger.exception("Error fetching blood facts")
        return error_response('Failed to fetch blood facts', 500)
    return records(facts)

# ============== ERROR HANDLERS ==============

def not_found(e):
    return error_response('Not found', 404)

def method_not_allowed(e):
    return error_response('Method not allowed', 405)

def server_error(e):
    return error_response('Internal server error', 500)

# ============== APPLICATION FACTORY ==============

def create_app(overrides=None):
    """Build the app and load storage before any request is served"""
    app = Flask(__name__)
    app.config.from_mapping(config.DEFAULTS)
    if overrides:
        app.config.from_mapping(overrides)
    # keep records in column order
    app.json.sort_keys = False

    storage = BloodLinkStorage(app.config['DATA_DIR'])
    storage.initialize()
    app.extensions['bloodlink_storage'] = storage

    app.register_blueprint(api)
    app.register_error_handler(404, not_found)
    app.register_error_handler(405, method_not_allowed)
    app.register_error_handler(500, server_error)
    return app

# ============== MAIN ==============

if __name__ == '__main__':
    config.configure_logging()
    app = create_app()
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
