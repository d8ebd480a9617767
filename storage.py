"""
BloodLink storage.

Every entity kind lives in memory in its own EntityCollection, keyed by an
auto-incrementing integer id. The CSV file behind each collection is a
write-through copy used to recover state on restart: inserts append one row,
updates rewrite the whole file from memory.

BloodLinkStorage must be initialized before use:

    storage = BloodLinkStorage(data_dir)
    storage.initialize()

initialize() loads every collection from disk and seeds the ones that come
back empty. Calls made while another thread is still initializing block
until the store is READY.
"""

import logging
import os
import threading

from csv_files import append_one, ensure_data_dir, read_all, read_header, write_all
from models import BOOL, INT, BloodFact, BloodRequest, Donor, EmergencyAlert, User, utc_timestamp
from seed_data import (SAMPLE_BLOOD_FACTS, SAMPLE_BLOOD_REQUESTS, SAMPLE_DONORS,
                       SAMPLE_EMERGENCY_ALERTS)

logger = logging.getLogger(__name__)

USERS_FILE = 'users.csv'
DONORS_FILE = 'donors.csv'
BLOOD_REQUESTS_FILE = 'blood_requests.csv'
EMERGENCY_ALERTS_FILE = 'emergency_alerts.csv'
BLOOD_FACTS_FILE = 'blood_facts.csv'

UNINITIALIZED = 'UNINITIALIZED'
LOADING = 'LOADING'
READY = 'READY'

# Columns the store assigns; callers can never set or change them
STORE_ASSIGNED = ('id', 'createdAt')

DONOR_DEFAULTS = {
    'lastDonationDate': None,
    'isAvailable': True,
    'isAnonymous': False,
    'donationCount': 0,
}
BLOOD_REQUEST_DEFAULTS = {'additionalInfo': None}
EMERGENCY_ALERT_DEFAULTS = {'contactNumber': None, 'isActive': True}
BLOOD_FACT_DEFAULTS = {'link': None}


class StorageError(Exception):
    pass


class StorageNotReadyError(StorageError):
    pass


class DuplicateUsernameError(StorageError):
    pass


def apply_defaults(values, defaults):
    """Fill optional columns that are absent, None or empty"""
    merged = dict(values)
    for name, default in defaults.items():
        if merged.get(name) in (None, ''):
            merged[name] = default
    return merged


def matches_type(value, type_tag):
    """True if value reads back from disk unchanged under type_tag"""
    if value is None:
        return True
    if type_tag == BOOL:
        return isinstance(value, bool)
    if type_tag == INT:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, str)


class EntityCollection:
    """In-memory records of one entity kind, mirrored to one CSV file"""

    def __init__(self, name, model, path):
        self.name = name
        self.model = model
        self.path = path
        self.fieldnames = model.fieldnames()
        self.records = {}
        self.next_id = 1
        # one writer at a time per file; held across the memory change and the flush
        self.lock = threading.RLock()

    def load(self):
        """Read the CSV file into memory. Returns the number of records loaded."""
        rows = read_all(self.path, self.model.schema())
        with self.lock:
            self.fieldnames = read_header(self.path) or self.model.fieldnames()
            for row in rows:
                entity = self.model.from_record(row)
                if not isinstance(entity.id, int) or isinstance(entity.id, bool):
                    logger.warning("Skipping %s row without a usable id: %r", self.name, row)
                    continue
                self.records[entity.id] = entity
                if entity.id >= self.next_id:
                    self.next_id = entity.id + 1
        logger.info("Loaded %d %s from %s", len(self.records), self.name, self.path)
        return len(self.records)

    def seed(self, samples):
        for values in samples:
            self.create(values)
        logger.info("Seeded %d default %s", len(samples), self.name)

    def create(self, values):
        values = {k: v for k, v in values.items() if k not in STORE_ASSIGNED}
        with self.lock:
            entity = self.model.from_record(values)
            entity.id = self.next_id
            self.next_id += 1
            if hasattr(entity, 'created_at'):
                entity.created_at = utc_timestamp()
            self.records[entity.id] = entity
            append_one(self.path, entity.to_record(), self.fieldnames)
        return entity

    def get(self, record_id):
        with self.lock:
            return self.records.get(record_id)

    def all(self):
        with self.lock:
            return list(self.records.values())

    def filter(self, predicate):
        return [entity for entity in self.all() if predicate(entity)]

    def find(self, predicate):
        for entity in self.all():
            if predicate(entity):
                return entity
        return None

    def update(self, record_id, changes):
        """Shallow-merge changes into a stored record and rewrite the file.

        Returns the updated record, or None if record_id is unknown.
        """
        schema = self.model.schema()
        for name, value in changes.items():
            if name in STORE_ASSIGNED:
                raise ValueError(f"{name} cannot be changed")
            if name not in schema:
                raise ValueError(f"Unknown {self.name} field: {name}")
            if not matches_type(value, schema[name]):
                raise ValueError(f"{name} must be of type {schema[name]}, got {value!r}")

        with self.lock:
            entity = self.records.get(record_id)
            if entity is None:
                return None
            record = entity.to_record()
            record.update(changes)
            updated = self.model.from_record(record)
            self.records[record_id] = updated
            write_all(self.path, [e.to_record() for e in self.records.values()], self.fieldnames)
        return updated


class BloodLinkStorage:
    """CSV-backed store for users, donors, blood requests, alerts and facts"""

    def __init__(self, data_dir):
        self.data_dir = data_dir
        self.users = EntityCollection('users', User, os.path.join(data_dir, USERS_FILE))
        self.donors = EntityCollection('donors', Donor, os.path.join(data_dir, DONORS_FILE))
        self.blood_requests = EntityCollection(
            'blood requests', BloodRequest, os.path.join(data_dir, BLOOD_REQUESTS_FILE))
        self.emergency_alerts = EntityCollection(
            'emergency alerts', EmergencyAlert, os.path.join(data_dir, EMERGENCY_ALERTS_FILE))
        self.blood_facts = EntityCollection(
            'blood facts', BloodFact, os.path.join(data_dir, BLOOD_FACTS_FILE))

        self.state = UNINITIALIZED
        self._init_lock = threading.Lock()
        self._ready = threading.Event()

    def _seed_plan(self):
        return [
            (self.users, None),
            (self.donors, SAMPLE_DONORS),
            (self.blood_requests, SAMPLE_BLOOD_REQUESTS),
            (self.emergency_alerts, SAMPLE_EMERGENCY_ALERTS),
            (self.blood_facts, SAMPLE_BLOOD_FACTS),
        ]

    def initialize(self):
        """Load every collection from disk, seeding the empty ones. Safe to call twice."""
        with self._init_lock:
            if self.state == READY:
                return self
            self.state = LOADING
            try:
                ensure_data_dir(self.data_dir)
                for collection, samples in self._seed_plan():
                    if collection.load() == 0 and samples:
                        collection.seed(samples)
            except Exception:
                self.state = UNINITIALIZED
                raise
            self.state = READY
            self._ready.set()
        logger.info("Storage ready in %s", self.data_dir)
        return self

    def _require_ready(self):
        if self._ready.is_set():
            return
        if self.state == UNINITIALIZED:
            raise StorageNotReadyError("Storage has not been initialized")
        while not self._ready.wait(0.05):
            if self.state == UNINITIALIZED:
                raise StorageNotReadyError("Storage initialization failed")

    # ---------- users ----------

    def get_user(self, user_id):
        self._require_ready()
        return self.users.get(user_id)

    def get_user_by_username(self, username):
        self._require_ready()
        return self.users.find(lambda user: user.username == username)

    def create_user(self, values):
        self._require_ready()
        with self.users.lock:
            if self.get_user_by_username(values.get('username')) is not None:
                raise DuplicateUsernameError(f"Username already taken: {values.get('username')}")
            return self.users.create(values)

    # ---------- donors ----------

    def get_all_donors(self):
        self._require_ready()
        return self.donors.all()

    def get_donor(self, donor_id):
        self._require_ready()
        return self.donors.get(donor_id)

    def get_donors_by_blood_group(self, blood_group):
        return self.filter_donors(blood_group=blood_group)

    def get_donors_by_city(self, city):
        return self.filter_donors(city=city)

    def get_donors_by_availability(self, is_available):
        return self.filter_donors(is_available=is_available)

    def filter_donors(self, blood_group=None, city=None, is_available=None):
        """AND-combine the given criteria; empty criteria match everything.

        blood_group is an exact match, city a case-insensitive substring match.
        """
        self._require_ready()
        city = city.lower() if city else None

        def matches(donor):
            if blood_group and donor.blood_group != blood_group:
                return False
            if city and city not in (donor.city or '').lower():
                return False
            if is_available is not None and donor.is_available != is_available:
                return False
            return True

        return self.donors.filter(matches)

    def create_donor(self, values):
        self._require_ready()
        donor = self.donors.create(apply_defaults(values, DONOR_DEFAULTS))
        logger.info("New donor registered: %s (%s)", donor.id, donor.blood_group)
        return donor

    def update_donor(self, donor_id, changes):
        self._require_ready()
        return self.donors.update(donor_id, changes)

    # ---------- blood requests ----------

    def get_all_blood_requests(self):
        self._require_ready()
        return self.blood_requests.all()

    def get_blood_request(self, request_id):
        self._require_ready()
        return self.blood_requests.get(request_id)

    def get_active_blood_requests(self):
        self._require_ready()
        return self.blood_requests.filter(lambda r: not r.is_fulfilled)

    def create_blood_request(self, values):
        self._require_ready()
        values = apply_defaults(values, BLOOD_REQUEST_DEFAULTS)
        values['isFulfilled'] = False
        blood_request = self.blood_requests.create(values)
        logger.info("New blood request: %s (%s, %s)",
                    blood_request.id, blood_request.blood_group, blood_request.urgency)
        return blood_request

    def mark_blood_request_fulfilled(self, request_id):
        """Set isFulfilled; fulfilling twice is harmless"""
        self._require_ready()
        return self.blood_requests.update(request_id, {'isFulfilled': True})

    # ---------- emergency alerts ----------

    def get_active_emergency_alerts(self):
        self._require_ready()
        return self.emergency_alerts.filter(lambda a: a.is_active)

    def create_emergency_alert(self, values):
        self._require_ready()
        return self.emergency_alerts.create(apply_defaults(values, EMERGENCY_ALERT_DEFAULTS))

    # ---------- blood facts ----------

    def get_all_blood_facts(self):
        self._require_ready()
        return self.blood_facts.all()

    def create_blood_fact(self, values):
        self._require_ready()
        return self.blood_facts.create(apply_defaults(values, BLOOD_FACT_DEFAULTS))
