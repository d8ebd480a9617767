"""
Validation of JSON request bodies.

Each validate_* function returns a clean mapping holding only the columns a
caller may set, or raises ValidationError listing every problem found.
"""

from csv_codec import is_date_string
from models import BLOOD_GROUPS, URGENCY_LEVELS


class ValidationError(ValueError):

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__('Validation error: ' + '; '.join(self.errors))


def _text(data, name, errors, required=True, choices=None):
    value = data.get(name)
    if value is None or value == '':
        if required:
            errors.append(f'{name} is required')
        return None
    if not isinstance(value, str):
        errors.append(f'{name} must be a string')
        return None
    value = value.strip()
    if required and not value:
        errors.append(f'{name} is required')
        return None
    if choices and value not in choices:
        errors.append(f"{name} must be one of {', '.join(choices)}")
        return None
    return value or None


def _integer(data, name, errors, required=True, minimum=None):
    value = data.get(name)
    if value is None:
        if required:
            errors.append(f'{name} is required')
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(f'{name} must be a whole number')
        return None
    if minimum is not None and value < minimum:
        errors.append(f'{name} must be at least {minimum}')
        return None
    return value


def _flag(data, name, errors, required=False):
    value = data.get(name)
    if value is None:
        if required:
            errors.append(f'{name} is required')
        return None
    if not isinstance(value, bool):
        errors.append(f'{name} must be true or false')
        return None
    return value


def _body(data):
    if not isinstance(data, dict):
        raise ValidationError(['request body must be a JSON object'])
    return data


def _clean(values):
    """Drop optional columns the client left out"""
    return {k: v for k, v in values.items() if v is not None}


def validate_donor(data):
    data = _body(data)
    errors = []
    values = {
        'fullName': _text(data, 'fullName', errors),
        'age': _integer(data, 'age', errors, minimum=1),
        'bloodGroup': _text(data, 'bloodGroup', errors, choices=BLOOD_GROUPS),
        'city': _text(data, 'city', errors),
        'pincode': _text(data, 'pincode', errors),
        'contactNumber': _text(data, 'contactNumber', errors),
        'healthCondition': _text(data, 'healthCondition', errors),
        'lastDonationDate': _text(data, 'lastDonationDate', errors, required=False),
        'isAvailable': _flag(data, 'isAvailable', errors),
        'isAnonymous': _flag(data, 'isAnonymous', errors),
        'donationCount': _integer(data, 'donationCount', errors, required=False, minimum=0),
    }
    last_donation = values['lastDonationDate']
    if last_donation is not None and not is_date_string(last_donation):
        errors.append('lastDonationDate must be a date (YYYY-MM-DD)')
    if errors:
        raise ValidationError(errors)
    return _clean(values)


def validate_availability(data):
    data = _body(data)
    errors = []
    is_available = _flag(data, 'isAvailable', errors, required=True)
    if errors:
        raise ValidationError(errors)
    return {'isAvailable': is_available}


def validate_blood_request(data):
    data = _body(data)
    errors = []
    values = {
        'patientName': _text(data, 'patientName', errors),
        'bloodGroup': _text(data, 'bloodGroup', errors, choices=BLOOD_GROUPS),
        'hospitalName': _text(data, 'hospitalName', errors),
        'hospitalLocation': _text(data, 'hospitalLocation', errors),
        'contactNumber': _text(data, 'contactNumber', errors),
        'urgency': _text(data, 'urgency', errors, choices=URGENCY_LEVELS),
        'additionalInfo': _text(data, 'additionalInfo', errors, required=False),
    }
    if errors:
        raise ValidationError(errors)
    return _clean(values)


def validate_emergency_alert(data):
    data = _body(data)
    errors = []
    values = {
        'message': _text(data, 'message', errors),
        'contactNumber': _text(data, 'contactNumber', errors, required=False),
        'isActive': _flag(data, 'isActive', errors),
    }
    if errors:
        raise ValidationError(errors)
    return _clean(values)
