"""Custom exceptions for the application"""


class ContactError(Exception):
    """Base error carrying the HTTP status it maps to"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ContactError):
    status_code = 400


class NotFoundError(ContactError):
    status_code = 404

    def __init__(self, resource: str = "Contact"):
        super().__init__(f"{resource} not found")


class InfrastructureError(ContactError):
    status_code = 500


class SaveFailedError(ContactError):
    """Store failure while writing a contact, reported to clients as a bad request"""
    status_code = 400
