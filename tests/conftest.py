import pytest

from app import create_app
from csv_files import write_all
from models import Donor
from storage import DONORS_FILE, BloodLinkStorage


def make_donor(id, full_name, blood_group, city, is_available=True):
    return Donor(
        id=id,
        full_name=full_name,
        age=30,
        blood_group=blood_group,
        city=city,
        pincode='411001',
        contact_number='9000000000',
        health_condition='good',
        is_available=is_available,
        created_at='2024-01-01T00:00:00.000Z',
    )


@pytest.fixture
def data_dir(tmp_path):
    return str(tmp_path / 'data')


@pytest.fixture
def storage(data_dir):
    return BloodLinkStorage(data_dir).initialize()


@pytest.fixture
def three_donor_storage(tmp_path):
    """Store whose donors file already holds A+, O-, A+ donors (so nothing is seeded)"""
    data_dir = str(tmp_path / 'data')
    donors = [
        make_donor(1, 'Ravi Kumar', 'A+', 'New York'),
        make_donor(2, 'Meena Iyer', 'O-', 'Pune', is_available=False),
        make_donor(3, 'John Smith', 'A+', 'Yorkshire', is_available=False),
    ]
    write_all(f'{data_dir}/{DONORS_FILE}', [d.to_record() for d in donors], Donor.fieldnames())
    return BloodLinkStorage(data_dir).initialize()


@pytest.fixture
def app(data_dir):
    app = create_app({'DATA_DIR': data_dir, 'TESTING': True})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
