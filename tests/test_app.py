from app import create_app
from seed_data import SAMPLE_BLOOD_FACTS, SAMPLE_DONORS

NEW_DONOR = {
    'fullName': 'Asha Rao',
    'age': 30,
    'bloodGroup': 'B+',
    'city': 'Pune',
    'pincode': '411001',
    'contactNumber': '9000000000',
    'healthCondition': 'good',
}

NEW_REQUEST = {
    'patientName': 'Meena Iyer',
    'bloodGroup': 'O-',
    'hospitalName': 'Ruby Hall Clinic',
    'hospitalLocation': 'Pune',
    'contactNumber': '9123456789',
    'urgency': 'medium',
}


def test_list_donors(client):
    response = client.get('/api/donors')
    assert response.status_code == 200
    donors = response.get_json()
    assert len(donors) == len(SAMPLE_DONORS)
    assert list(donors[0].keys())[:2] == ['id', 'fullName']


def test_filter_donors(client):
    response = client.get('/api/donors/filter?bloodGroup=A%2B&availability=available')
    assert response.status_code == 200
    names = [d['fullName'] for d in response.get_json()]
    assert names == ['Virat Kohli', 'Arun Yadav']


def test_filter_donors_by_city_and_unavailable(client):
    response = client.get('/api/donors/filter?city=san&availability=unavailable')
    assert [d['fullName'] for d in response.get_json()] == ['Krish Gupta']


def test_filter_without_criteria_returns_everyone(client):
    response = client.get('/api/donors/filter?bloodGroup=&city=')
    assert len(response.get_json()) == len(SAMPLE_DONORS)


def test_get_donor(client):
    response = client.get('/api/donors/1')
    assert response.status_code == 200
    assert response.get_json()['fullName'] == 'Sharath Bandaari'


def test_get_donor_invalid_id(client):
    response = client.get('/api/donors/abc')
    assert response.status_code == 400
    assert response.get_json() == {'message': 'Invalid donor ID'}


def test_get_donor_not_found(client):
    response = client.get('/api/donors/999')
    assert response.status_code == 404
    assert response.get_json() == {'message': 'Donor not found'}


def test_create_donor(client):
    response = client.post('/api/donors', json=NEW_DONOR)
    assert response.status_code == 201
    donor = response.get_json()
    assert donor['id'] == len(SAMPLE_DONORS) + 1
    assert donor['isAvailable'] is True
    assert donor['isAnonymous'] is False
    assert donor['donationCount'] == 0
    assert donor['contactNumber'] == '9000000000'
    assert donor['createdAt']

    found = client.get('/api/donors/filter?bloodGroup=B%2B').get_json()
    assert donor['id'] in [d['id'] for d in found]


def test_created_donor_survives_restart(client, data_dir):
    donor = client.post('/api/donors', json=NEW_DONOR).get_json()

    restarted = create_app({'DATA_DIR': data_dir, 'TESTING': True}).test_client()
    assert restarted.get(f"/api/donors/{donor['id']}").get_json() == donor


def test_create_donor_validation_error(client):
    response = client.post('/api/donors', json=dict(NEW_DONOR, bloodGroup='C+', age='thirty'))
    assert response.status_code == 400
    message = response.get_json()['message']
    assert message.startswith('Validation error')
    assert 'bloodGroup' in message
    assert 'age' in message


def test_create_donor_rejects_numeric_contact_number(client):
    response = client.post('/api/donors', json=dict(NEW_DONOR, contactNumber=9000000000))
    assert response.status_code == 400


def test_create_donor_without_body(client):
    response = client.post('/api/donors', data='not json', content_type='text/plain')
    assert response.status_code == 400


def test_update_availability(client):
    response = client.patch('/api/donors/2/availability', json={'isAvailable': False})
    assert response.status_code == 200
    assert response.get_json()['isAvailable'] is False
    assert client.get('/api/donors/2').get_json()['isAvailable'] is False


def test_update_availability_errors(client):
    assert client.patch('/api/donors/x/availability', json={'isAvailable': True}).status_code == 400
    assert client.patch('/api/donors/1/availability', json={'isAvailable': 'yes'}).status_code == 400
    assert client.patch('/api/donors/404/availability', json={'isAvailable': True}).status_code == 404


def test_blood_request_lifecycle(client):
    response = client.post('/api/blood-requests', json=NEW_REQUEST)
    assert response.status_code == 201
    created = response.get_json()
    assert created['isFulfilled'] is False
    assert created['additionalInfo'] is None

    active_ids = [r['id'] for r in client.get('/api/blood-requests/active').get_json()]
    assert created['id'] in active_ids

    response = client.patch(f"/api/blood-requests/{created['id']}/fulfill")
    assert response.status_code == 200
    assert response.get_json()['isFulfilled'] is True

    again = client.patch(f"/api/blood-requests/{created['id']}/fulfill")
    assert again.status_code == 200
    assert again.get_json()['isFulfilled'] is True

    active_ids = [r['id'] for r in client.get('/api/blood-requests/active').get_json()]
    assert created['id'] not in active_ids
    assert len(client.get('/api/blood-requests').get_json()) == 2
    assert client.get(f"/api/blood-requests/{created['id']}").get_json()['isFulfilled'] is True


def test_blood_request_errors(client):
    assert client.post('/api/blood-requests',
                       json=dict(NEW_REQUEST, urgency='critical')).status_code == 400
    assert client.patch('/api/blood-requests/abc/fulfill').status_code == 400
    assert client.patch('/api/blood-requests/999/fulfill').status_code == 404
    assert client.get('/api/blood-requests/999').status_code == 404


def test_emergency_alerts(client):
    active = client.get('/api/emergency-alerts/active').get_json()
    assert len(active) == 1
    assert active[0]['contactNumber'] == '+1-234-567-8901'

    response = client.post('/api/emergency-alerts', json={'message': 'AB- needed at KEM Hospital'})
    assert response.status_code == 201
    assert response.get_json()['isActive'] is True
    assert len(client.get('/api/emergency-alerts/active').get_json()) == 2

    assert client.post('/api/emergency-alerts', json={'message': ''}).status_code == 400


def test_blood_facts(client):
    facts = client.get('/api/blood-facts').get_json()
    assert [f['title'] for f in facts] == [f['title'] for f in SAMPLE_BLOOD_FACTS]


def test_storage_failure_returns_500(client, app, monkeypatch):
    def broken(*args, **kwargs):
        raise PermissionError('disk unavailable')

    monkeypatch.setattr('storage.append_one', broken)
    response = client.post('/api/donors', json=NEW_DONOR)
    assert response.status_code == 500
    assert response.get_json() == {'message': 'Failed to create donor'}


def test_unknown_route(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json() == {'message': 'Not found'}


def test_long_additional_info_survives_restart(client, data_dir):
    long_info = 'x' * 140000
    response = client.post('/api/blood-requests', json=dict(NEW_REQUEST, additionalInfo=long_info))
    assert response.status_code == 201
    request_id = response.get_json()['id']

    restarted = create_app({'DATA_DIR': data_dir, 'TESTING': True}).test_client()
    fetched = restarted.get(f'/api/blood-requests/{request_id}').get_json()
    assert fetched['additionalInfo'] == long_info


def test_ids_must_be_plain_digits(client):
    for raw in ('1_0', '%205', '-1', '\u0661'):
        assert client.get(f'/api/donors/{raw}').status_code == 400
    assert client.patch('/api/blood-requests/1_0/fulfill').status_code == 400
