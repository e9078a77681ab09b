"""
Custom exceptions for Palaver application.

Every failure raised by the conversation and message engine is one of the
exceptions below. Each carries an error code, an HTTP status code and a
default message, so the REST layer can render it without translation.
"""

from rest_framework import status
from rest_framework.exceptions import APIException

from core.common.error_codes import CommonAPIErrorCodes


class PalaverBaseException(APIException):
    """
    Base exception for all Palaver exceptions.

    All custom exceptions should inherit from this class to ensure consistent
    error handling and response formatting.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "An unexpected error occurred."
    default_code = CommonAPIErrorCodes.INTERNAL_SERVER_ERROR


class InvalidArgumentException(PalaverBaseException):
    """
    Exception raised when input is malformed or missing.

    Never worth retrying: the same input will fail the same way.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid argument provided."
    default_code = CommonAPIErrorCodes.INVALID_ARGUMENT


class AuthenticationException(PalaverBaseException):
    """
    Exception raised when the caller cannot be identified.
    """
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication failed."
    default_code = CommonAPIErrorCodes.AUTHENTICATION_ERROR


class AuthorizationException(PalaverBaseException):
    """
    Exception raised when the actor lacks rights over the entity.

    Raised, for instance, when a non-member sends into a conversation or a
    user deletes someone else's message.
    """
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action."
    default_code = CommonAPIErrorCodes.AUTHORIZATION_ERROR


class ResourceNotFoundException(PalaverBaseException):
    """
    Exception raised when a referenced entity does not exist.
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "The requested resource was not found."
    default_code = CommonAPIErrorCodes.RESOURCE_NOT_FOUND


class ResourceConflictException(PalaverBaseException):
    """
    Exception raised when a resource conflict occurs.

    This exception should be used when the requested change contradicts the
    current state, such as a duplicate entry.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "A conflict occurred with the requested resource."
    default_code = CommonAPIErrorCodes.RESOURCE_CONFLICT


class DuplicateEntityException(ResourceConflictException):
    """
    Exception raised when attempting to create an entity that already exists.
    """
    default_detail = "The entity already exists."
    default_code = CommonAPIErrorCodes.DUPLICATE_ENTITY


class MembershipLimitException(ResourceConflictException):
    """
    Exception raised when a private conversation would get a third member.
    """
    default_detail = "A private conversation cannot have more than two members."
    default_code = CommonAPIErrorCodes.MEMBERSHIP_LIMIT_REACHED


class ServiceUnavailableException(PalaverBaseException):
    """
    Exception raised when the database cannot be reached.

    Safe to retry the whole action: every multi-step write is transactional,
    so nothing from the failed attempt was persisted.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Service is temporarily unavailable."
    default_code = CommonAPIErrorCodes.SERVICE_UNAVAILABLE
