"""
Entity types for BloodLink.

Every entity is a flat record. Column names (on disk and in the JSON API)
are camelCase; attributes are snake_case. Each model carries a COLUMNS
schema that tells the CSV codec how to type every column.
"""

from dataclasses import MISSING, dataclass, fields
from datetime import datetime, timezone
from typing import Optional

BLOOD_GROUPS = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']
URGENCY_LEVELS = ['low', 'medium', 'high']

# Type tags understood by csv_codec.coerce_value
INT = 'int'
BOOL = 'bool'
STR = 'str'
DATE = 'date'


@dataclass(frozen=True)
class Column:
    name: str
    attr: str
    type: str


def utc_timestamp():
    """Current UTC time as YYYY-MM-DDTHH:MM:SS.mmmZ"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class Record:
    """Mixin shared by all entity dataclasses"""

    COLUMNS = ()

    @classmethod
    def fieldnames(cls):
        return [c.name for c in cls.COLUMNS]

    @classmethod
    def schema(cls):
        """Column name -> type tag, as used by the codec"""
        return {c.name: c.type for c in cls.COLUMNS}

    @classmethod
    def from_record(cls, record):
        """Build an entity from a camelCase mapping.

        Absent columns take the field default, or None when there is none,
        so a short row read from disk still produces a record.
        """
        defaults = {f.name: f.default for f in fields(cls)}
        kwargs = {}
        for column in cls.COLUMNS:
            if column.name in record:
                kwargs[column.attr] = record[column.name]
            elif defaults.get(column.attr, MISSING) is MISSING:
                kwargs[column.attr] = None
        return cls(**kwargs)

    def to_record(self):
        """camelCase mapping in column order"""
        return {c.name: getattr(self, c.attr) for c in self.COLUMNS}


@dataclass
class User(Record):
    username: str
    password: str
    id: Optional[int] = None

    COLUMNS = (
        Column('id', 'id', INT),
        Column('username', 'username', STR),
        Column('password', 'password', STR),
    )


@dataclass
class Donor(Record):
    full_name: str
    age: int
    blood_group: str
    city: str
    pincode: str
    contact_number: str
    health_condition: str
    last_donation_date: Optional[str] = None
    is_available: bool = True
    is_anonymous: bool = False
    donation_count: int = 0
    id: Optional[int] = None
    created_at: Optional[str] = None

    COLUMNS = (
        Column('id', 'id', INT),
        Column('fullName', 'full_name', STR),
        Column('age', 'age', INT),
        Column('bloodGroup', 'blood_group', STR),
        Column('city', 'city', STR),
        Column('pincode', 'pincode', STR),
        Column('contactNumber', 'contact_number', STR),
        Column('lastDonationDate', 'last_donation_date', DATE),
        Column('healthCondition', 'health_condition', STR),
        Column('isAvailable', 'is_available', BOOL),
        Column('isAnonymous', 'is_anonymous', BOOL),
        Column('donationCount', 'donation_count', INT),
        Column('createdAt', 'created_at', DATE),
    )


@dataclass
class BloodRequest(Record):
    patient_name: str
    blood_group: str
    hospital_name: str
    hospital_location: str
    contact_number: str
    urgency: str
    additional_info: Optional[str] = None
    is_fulfilled: bool = False
    id: Optional[int] = None
    created_at: Optional[str] = None

    COLUMNS = (
        Column('id', 'id', INT),
        Column('patientName', 'patient_name', STR),
        Column('bloodGroup', 'blood_group', STR),
        Column('hospitalName', 'hospital_name', STR),
        Column('hospitalLocation', 'hospital_location', STR),
        Column('contactNumber', 'contact_number', STR),
        Column('urgency', 'urgency', STR),
        Column('additionalInfo', 'additional_info', STR),
        Column('isFulfilled', 'is_fulfilled', BOOL),
        Column('createdAt', 'created_at', DATE),
    )


@dataclass
class EmergencyAlert(Record):
    message: str
    contact_number: Optional[str] = None
    is_active: bool = True
    id: Optional[int] = None
    created_at: Optional[str] = None

    COLUMNS = (
        Column('id', 'id', INT),
        Column('message', 'message', STR),
        Column('contactNumber', 'contact_number', STR),
        Column('isActive', 'is_active', BOOL),
        Column('createdAt', 'created_at', DATE),
    )


@dataclass
class BloodFact(Record):
    title: str
    content: str
    icon: str
    link: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[str] = None

    COLUMNS = (
        Column('id', 'id', INT),
        Column('title', 'title', STR),
        Column('content', 'content', STR),
        Column('icon', 'icon', STR),
        Column('link', 'link', STR),
        Column('createdAt', 'created_at', DATE),
    )
