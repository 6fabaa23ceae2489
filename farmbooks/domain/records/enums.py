"""Farm record domain enums."""

from enum import Enum as PyEnum


class Farm(str, PyEnum):
    """Operating sites records are tagged with."""
    KAASI_19 = "KAASI_19"
    MATITAL = "MATITAL"
    COMBINED = "COMBINED"
    OTHER = "OTHER"
    MANAGEMENT = "MANAGEMENT"  # Salaries only


class ExpenseHead(str, PyEnum):
    """Cost category of an expense record."""
    CHICKEN = "CHICKEN"
    FEED = "FEED"
    RENT = "RENT"
    UTILITIES = "UTILITIES"
    PACKING_MATERIAL = "PACKING_MATERIAL"
    TP = "TP"
    SALARIES_PAYMENTS = "SALARIES_PAYMENTS"
    MESS = "MESS"
    POWER_ELECTRIC = "POWER_ELECTRIC"
    POL = "POL"  # Petrol, oil, lubricants
    MEDICINE = "MEDICINE"
    VACCINE = "VACCINE"
    REPAIR_MAINTENANCE = "REPAIR_MAINTENANCE"
    TRAVELLING_LOGISTICS = "TRAVELLING_LOGISTICS"
    OFFICE_EXPENSES = "OFFICE_EXPENSES"
    MEETING_REFRESHMENT = "MEETING_REFRESHMENT"
    FURNITURE_FIXTURE = "FURNITURE_FIXTURE"
    COMPUTER_DEVICES = "COMPUTER_DEVICES"
    PROFESSIONAL_FEE = "PROFESSIONAL_FEE"
    MISCELLANEOUS = "MISCELLANEOUS"
    SHAREHOLDERS_DIVIDEND = "SHAREHOLDERS_DIVIDEND"
    OTHER = "OTHER"


class VoucherType(str, PyEnum):
    """Feed voucher direction."""
    IN = "IN"
    OUT = "OUT"


class UserRole(str, PyEnum):
    """Application user roles."""
    ADMIN = "admin"
    USER = "user"
