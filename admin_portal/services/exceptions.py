# admin_portal/services/exceptions.py


class PortalError(Exception):
    """Base for errors the service layer hands to the HTTP boundary."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- 400 ---
class ValidationError(PortalError):
    """Missing or malformed required field"""
    status_code = 400
    default_message = "Invalid request payload"


# --- 401 ---
class UnauthorizedError(PortalError):
    """Missing/invalid session, bad credentials or unusable token"""
    status_code = 401
    default_message = "Unauthorized"


# --- 404 ---
class NotFoundError(PortalError):
    """No row matches the requested id"""
    status_code = 404
    default_message = "Not found"


# --- 500 ---
class ServiceError(PortalError):
    """Database or collaborator failure"""
    pass


class MailDeliveryError(ServiceError):
    """Email transport rejected or could not be reached"""
    default_message = "Failed to send email"


class StorageError(ServiceError):
    """Image storage rejected or could not be reached"""
    default_message = "Image storage request failed"
