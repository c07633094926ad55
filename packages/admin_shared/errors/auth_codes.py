"""Firebase Authentication client error table and server token mapping."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .types import ErrorInfo


class AuthClientErrorCode(Enum):
    """Auth client errors and their default messages."""

    BILLING_NOT_ENABLED = ErrorInfo(
        "billing-not-enabled", "Feature requires billing to be enabled."
    )
    CLAIMS_TOO_LARGE = ErrorInfo(
        "claims-too-large", "Developer claims maximum payload size exceeded."
    )
    CONFIGURATION_EXISTS = ErrorInfo(
        "configuration-exists",
        "A configuration already exists with the provided identifier.",
    )
    CONFIGURATION_NOT_FOUND = ErrorInfo(
        "configuration-not-found",
        "There is no configuration corresponding to the provided identifier.",
    )
    ID_TOKEN_EXPIRED = ErrorInfo(
        "id-token-expired", "The provided Firebase ID token is expired."
    )
    INVALID_ARGUMENT = ErrorInfo("argument-error", "Invalid argument provided.")
    INVALID_CONFIG = ErrorInfo(
        "invalid-config", "The provided configuration is invalid."
    )
    EMAIL_ALREADY_EXISTS = ErrorInfo(
        "email-already-exists",
        "The email address is already in use by another account.",
    )
    FORBIDDEN_CLAIM = ErrorInfo(
        "reserved-claim",
        "The specified developer claim is reserved and cannot be specified.",
    )
    INVALID_ID_TOKEN = ErrorInfo(
        "invalid-id-token",
        "The provided ID token is not a valid Firebase ID token.",
    )
    ID_TOKEN_REVOKED = ErrorInfo(
        "id-token-revoked", "The Firebase ID token has been revoked."
    )
    INTERNAL_ERROR = ErrorInfo("internal-error", "An internal error has occurred.")
    INVALID_CLAIMS = ErrorInfo(
        "invalid-claims", "The provided custom claim attributes are invalid."
    )
    INVALID_CONTINUE_URI = ErrorInfo(
        "invalid-continue-uri", "The continue URL must be a valid URL string."
    )
    INVALID_CREATION_TIME = ErrorInfo(
        "invalid-creation-time", "The creation time must be a valid UTC date string."
    )
    INVALID_CREDENTIAL = ErrorInfo(
        "invalid-credential", "Invalid credential object provided."
    )
    INVALID_DISABLED_FIELD = ErrorInfo(
        "invalid-disabled-field", "The disabled field must be a boolean."
    )
    INVALID_DISPLAY_NAME = ErrorInfo(
        "invalid-display-name", "The displayName field must be a valid string."
    )
    INVALID_DYNAMIC_LINK_DOMAIN = ErrorInfo(
        "invalid-dynamic-link-domain",
        "The provided dynamic link domain is not configured or authorized "
        "for the current project.",
    )
    INVALID_EMAIL_VERIFIED = ErrorInfo(
        "invalid-email-verified", "The emailVerified field must be a boolean."
    )
    INVALID_EMAIL = ErrorInfo(
        "invalid-email", "The email address is improperly formatted."
    )
    INVALID_ENROLLED_FACTORS = ErrorInfo(
        "invalid-enrolled-factors",
        "The enrolled factors must be a valid array of MultiFactorInfo objects.",
    )
    INVALID_ENROLLMENT_TIME = ErrorInfo(
        "invalid-enrollment-time",
        "The second factor enrollment time must be a valid UTC date string.",
    )
    INVALID_HASH_ALGORITHM = ErrorInfo(
        "invalid-hash-algorithm",
        "The hash algorithm must match one of the strings in the list of "
        "supported algorithms.",
    )
    INVALID_HASH_BLOCK_SIZE = ErrorInfo(
        "invalid-hash-block-size", "The hash block size must be a valid number."
    )
    INVALID_HASH_DERIVED_KEY_LENGTH = ErrorInfo(
        "invalid-hash-derived-key-length",
        "The hash derived key length must be a valid number.",
    )
    INVALID_HASH_KEY = ErrorInfo(
        "invalid-hash-key", "The hash key must a valid byte buffer."
    )
    INVALID_HASH_MEMORY_COST = ErrorInfo(
        "invalid-hash-memory-cost", "The hash memory cost must be a valid number."
    )
    INVALID_HASH_PARALLELIZATION = ErrorInfo(
        "invalid-hash-parallelization",
        "The hash parallelization must be a valid number.",
    )
    INVALID_HASH_ROUNDS = ErrorInfo(
        "invalid-hash-rounds", "The hash rounds must be a valid number."
    )
    INVALID_HASH_SALT_SEPARATOR = ErrorInfo(
        "invalid-hash-salt-separator",
        "The hashing algorithm salt separator field must be a valid byte buffer.",
    )
    INVALID_LAST_SIGN_IN_TIME = ErrorInfo(
        "invalid-last-sign-in-time",
        "The last sign-in time must be a valid UTC date string.",
    )
    INVALID_NAME = ErrorInfo("invalid-name", "The resource name provided is invalid.")
    INVALID_OAUTH_CLIENT_ID = ErrorInfo(
        "invalid-oauth-client-id", "The provided OAuth client ID is invalid."
    )
    INVALID_PAGE_TOKEN = ErrorInfo(
        "invalid-page-token", "The page token must be a valid non-empty string."
    )
    INVALID_PASSWORD = ErrorInfo(
        "invalid-password",
        "The password must be a string with at least 6 characters.",
    )
    INVALID_PASSWORD_HASH = ErrorInfo(
        "invalid-password-hash", "The password hash must be a valid byte buffer."
    )
    INVALID_PASSWORD_SALT = ErrorInfo(
        "invalid-password-salt", "The password salt must be a valid byte buffer."
    )
    INVALID_PHONE_NUMBER = ErrorInfo(
        "invalid-phone-number",
        "The phone number must be a non-empty E.164 standard compliant identifier "
        "string.",
    )
    INVALID_PHOTO_URL = ErrorInfo(
        "invalid-photo-url", "The photoURL field must be a valid URL."
    )
    INVALID_PROJECT_ID = ErrorInfo(
        "invalid-project-id",
        "Invalid parent project. Either parent project doesn't exist or didn't "
        "enable multi-tenancy.",
    )
    INVALID_PROVIDER_DATA = ErrorInfo(
        "invalid-provider-data",
        "The providerData must be a valid array of UserInfo objects.",
    )
    INVALID_PROVIDER_ID = ErrorInfo(
        "invalid-provider-id",
        "The providerId must be a valid supported provider identifier string.",
    )
    INVALID_PROVIDER_UID = ErrorInfo(
        "invalid-provider-uid", "The providerUid must be a valid provider uid string."
    )
    INVALID_SERVICE_ACCOUNT = ErrorInfo(
        "invalid-service-account", "Invalid service account."
    )
    INVALID_SESSION_COOKIE_DURATION = ErrorInfo(
        "invalid-session-cookie-duration",
        "The session cookie duration must be a valid number in milliseconds "
        "between 5 minutes and 2 weeks.",
    )
    INVALID_TENANT_ID = ErrorInfo(
        "invalid-tenant-id", "The tenant ID must be a valid non-empty string."
    )
    INVALID_TENANT_TYPE = ErrorInfo(
        "invalid-tenant-type",
        'Tenant type must be either "full_service" or "lightweight".',
    )
    INVALID_TESTING_PHONE_NUMBER = ErrorInfo(
        "invalid-testing-phone-number",
        "Invalid testing phone number or invalid test code provided.",
    )
    INVALID_UID = ErrorInfo(
        "invalid-uid",
        "The uid must be a non-empty string with at most 128 characters.",
    )
    INVALID_USER_IMPORT = ErrorInfo(
        "invalid-user-import", "The user record to import is invalid."
    )
    INVALID_TOKENS_VALID_AFTER_TIME = ErrorInfo(
        "invalid-tokens-valid-after-time",
        "The tokensValidAfterTime must be a valid UTC number in seconds.",
    )
    MISMATCHING_TENANT_ID = ErrorInfo(
        "mismatching-tenant-id",
        "User tenant ID does not match with the current TenantAwareAuth tenant ID.",
    )
    MISSING_ANDROID_PACKAGE_NAME = ErrorInfo(
        "missing-android-pkg-name",
        "An Android Package Name must be provided if the Android App is "
        "required to be installed.",
    )
    MISSING_CONFIG = ErrorInfo(
        "missing-config",
        "The provided configuration is missing required attributes.",
    )
    MISSING_CONTINUE_URI = ErrorInfo(
        "missing-continue-uri", "A valid continue URL must be provided in the request."
    )
    MISSING_DISPLAY_NAME = ErrorInfo(
        "missing-display-name",
        "The resource being created or edited is missing a valid display name.",
    )
    MISSING_EMAIL = ErrorInfo(
        "missing-email",
        "The email is required for the specified action. For example, a "
        "multi-factor user requires a verified email.",
    )
    MISSING_IOS_BUNDLE_ID = ErrorInfo(
        "missing-ios-bundle-id", "The request is missing an iOS Bundle ID."
    )
    MISSING_ISSUER = ErrorInfo(
        "missing-issuer", "The OAuth/OIDC configuration issuer must not be empty."
    )
    MISSING_HASH_ALGORITHM = ErrorInfo(
        "missing-hash-algorithm",
        "Importing users with password hashes requires that the hashing "
        "algorithm and its parameters be provided.",
    )
    MISSING_OAUTH_CLIENT_ID = ErrorInfo(
        "missing-oauth-client-id",
        "The OAuth/OIDC configuration client ID must not be empty.",
    )
    MISSING_PROVIDER_ID = ErrorInfo(
        "missing-provider-id", "A valid provider ID must be provided in the request."
    )
    MISSING_SAML_RELYING_PARTY_CONFIG = ErrorInfo(
        "missing-saml-relying-party-config",
        "The SAML configuration provided is missing a relying party configuration.",
    )
    MAXIMUM_TEST_PHONE_NUMBER_EXCEEDED = ErrorInfo(
        "test-phone-number-limit-exceeded",
        "The maximum allowed number of test phone number / code pairs has been "
        "exceeded.",
    )
    MAXIMUM_USER_COUNT_EXCEEDED = ErrorInfo(
        "maximum-user-count-exceeded",
        "The maximum allowed number of users to import has been exceeded.",
    )
    MISSING_UID = ErrorInfo(
        "missing-uid", "A uid identifier is required for the current operation."
    )
    OPERATION_NOT_ALLOWED = ErrorInfo(
        "operation-not-allowed",
        "The given sign-in provider is disabled for this Firebase project. "
        "Enable it in the Firebase console, under the sign-in method tab of the "
        "Auth section.",
    )
    PHONE_NUMBER_ALREADY_EXISTS = ErrorInfo(
        "phone-number-already-exists",
        "The user with the provided phone number already exists.",
    )
    PROJECT_NOT_FOUND = ErrorInfo(
        "project-not-found", "No Firebase project was found for the provided credential."
    )
    INSUFFICIENT_PERMISSION = ErrorInfo(
        "insufficient-permission",
        "Credential used to authenticate this SDK has insufficient permission to "
        "access the requested resource. See "
        "https://firebase.google.com/docs/admin/setup for details on how to "
        "authenticate this SDK with appropriate permissions.",
    )
    QUOTA_EXCEEDED = ErrorInfo(
        "quota-exceeded",
        "The project quota for the specified operation has been exceeded.",
    )
    SECOND_FACTOR_LIMIT_EXCEEDED = ErrorInfo(
        "second-factor-limit-exceeded",
        "The maximum number of allowed second factors on a user has been exceeded.",
    )
    SECOND_FACTOR_UID_ALREADY_EXISTS = ErrorInfo(
        "second-factor-uid-already-exists",
        'The specified second factor "uid" already exists.',
    )
    SESSION_COOKIE_EXPIRED = ErrorInfo(
        "session-cookie-expired", "The Firebase session cookie is expired."
    )
    SESSION_COOKIE_REVOKED = ErrorInfo(
        "session-cookie-revoked", "The Firebase session cookie has been revoked."
    )
    TENANT_NOT_FOUND = ErrorInfo(
        "tenant-not-found",
        "There is no tenant corresponding to the provided identifier.",
    )
    UID_ALREADY_EXISTS = ErrorInfo(
        "uid-already-exists", "The user with the provided uid already exists."
    )
    UNAUTHORIZED_DOMAIN = ErrorInfo(
        "unauthorized-continue-uri",
        "The domain of the continue URL is not whitelisted. Whitelist the domain "
        "in the Firebase console.",
    )
    UNSUPPORTED_FIRST_FACTOR = ErrorInfo(
        "unsupported-first-factor",
        "A multi-factor user requires a supported first factor.",
    )
    UNSUPPORTED_SECOND_FACTOR = ErrorInfo(
        "unsupported-second-factor",
        "The request specified an unsupported type of second factor.",
    )
    UNSUPPORTED_TENANT_OPERATION = ErrorInfo(
        "unsupported-tenant-operation",
        "This operation is not supported in a multi-tenant context.",
    )
    UNVERIFIED_EMAIL = ErrorInfo(
        "unverified-email",
        "A verified email is required for the specified action. For example, a "
        "multi-factor user requires a verified email.",
    )
    USER_NOT_FOUND = ErrorInfo(
        "user-not-found",
        "There is no user record corresponding to the provided identifier.",
    )
    NOT_FOUND = ErrorInfo("not-found", "The requested resource was not found.")
    USER_NOT_DISABLED = ErrorInfo(
        "user-not-disabled",
        "The user must be disabled in order to bulk delete it (or you must pass "
        "force=true).",
    )


_A = AuthClientErrorCode

AUTH_SERVER_TO_CLIENT_CODE: Mapping[str, AuthClientErrorCode] = MappingProxyType(
    {
        "BILLING_NOT_ENABLED": _A.BILLING_NOT_ENABLED,
        "CLAIMS_TOO_LARGE": _A.CLAIMS_TOO_LARGE,
        "CONFIGURATION_EXISTS": _A.CONFIGURATION_EXISTS,
        "CONFIGURATION_NOT_FOUND": _A.CONFIGURATION_NOT_FOUND,
        "INSUFFICIENT_PERMISSION": _A.INSUFFICIENT_PERMISSION,
        "INVALID_CONFIG": _A.INVALID_CONFIG,
        "INVALID_CONFIG_ID": _A.INVALID_PROVIDER_ID,
        "INVALID_CONTINUE_URI": _A.INVALID_CONTINUE_URI,
        "INVALID_DYNAMIC_LINK_DOMAIN": _A.INVALID_DYNAMIC_LINK_DOMAIN,
        "DUPLICATE_EMAIL": _A.EMAIL_ALREADY_EXISTS,
        "DUPLICATE_LOCAL_ID": _A.UID_ALREADY_EXISTS,
        "DUPLICATE_MFA_ENROLLMENT_ID": _A.SECOND_FACTOR_UID_ALREADY_EXISTS,
        "EMAIL_EXISTS": _A.EMAIL_ALREADY_EXISTS,
        "FORBIDDEN_CLAIM": _A.FORBIDDEN_CLAIM,
        "INVALID_CLAIMS": _A.INVALID_CLAIMS,
        "INVALID_DURATION": _A.INVALID_SESSION_COOKIE_DURATION,
        "INVALID_EMAIL": _A.INVALID_EMAIL,
        "INVALID_DISPLAY_NAME": _A.INVALID_DISPLAY_NAME,
        "INVALID_ID_TOKEN": _A.INVALID_ID_TOKEN,
        "INVALID_NAME": _A.INVALID_NAME,
        "INVALID_OAUTH_CLIENT_ID": _A.INVALID_OAUTH_CLIENT_ID,
        "INVALID_PAGE_SELECTION": _A.INVALID_PAGE_TOKEN,
        "INVALID_PHONE_NUMBER": _A.INVALID_PHONE_NUMBER,
        "INVALID_PROJECT_ID": _A.INVALID_PROJECT_ID,
        "INVALID_PROVIDER_ID": _A.INVALID_PROVIDER_ID,
        "INVALID_SERVICE_ACCOUNT": _A.INVALID_SERVICE_ACCOUNT,
        "INVALID_TESTING_PHONE_NUMBER": _A.INVALID_TESTING_PHONE_NUMBER,
        "INVALID_TENANT_TYPE": _A.INVALID_TENANT_TYPE,
        "MISSING_ANDROID_PACKAGE_NAME": _A.MISSING_ANDROID_PACKAGE_NAME,
        "MISSING_CONFIG": _A.MISSING_CONFIG,
        "MISSING_CONFIG_ID": _A.MISSING_PROVIDER_ID,
        "MISSING_DISPLAY_NAME": _A.MISSING_DISPLAY_NAME,
        "MISSING_EMAIL": _A.MISSING_EMAIL,
        "MISSING_IOS_BUNDLE_ID": _A.MISSING_IOS_BUNDLE_ID,
        "MISSING_ISSUER": _A.MISSING_ISSUER,
        "MISSING_LOCAL_ID": _A.MISSING_UID,
        "MISSING_OAUTH_CLIENT_ID": _A.MISSING_OAUTH_CLIENT_ID,
        "MISSING_PROVIDER_ID": _A.MISSING_PROVIDER_ID,
        "MISSING_SAML_RELYING_PARTY_CONFIG": _A.MISSING_SAML_RELYING_PARTY_CONFIG,
        "MISSING_USER_ACCOUNT": _A.MISSING_UID,
        "OPERATION_NOT_ALLOWED": _A.OPERATION_NOT_ALLOWED,
        "PERMISSION_DENIED": _A.INSUFFICIENT_PERMISSION,
        "PHONE_NUMBER_EXISTS": _A.PHONE_NUMBER_ALREADY_EXISTS,
        "PROJECT_NOT_FOUND": _A.PROJECT_NOT_FOUND,
        "QUOTA_EXCEEDED": _A.QUOTA_EXCEEDED,
        "SECOND_FACTOR_LIMIT_EXCEEDED": _A.SECOND_FACTOR_LIMIT_EXCEEDED,
        "TENANT_NOT_FOUND": _A.TENANT_NOT_FOUND,
        "TENANT_ID_MISMATCH": _A.MISMATCHING_TENANT_ID,
        "TOKEN_EXPIRED": _A.ID_TOKEN_EXPIRED,
        "UNAUTHORIZED_DOMAIN": _A.UNAUTHORIZED_DOMAIN,
        "UNSUPPORTED_FIRST_FACTOR": _A.UNSUPPORTED_FIRST_FACTOR,
        "UNSUPPORTED_SECOND_FACTOR": _A.UNSUPPORTED_SECOND_FACTOR,
        "UNSUPPORTED_TENANT_OPERATION": _A.UNSUPPORTED_TENANT_OPERATION,
        "UNVERIFIED_EMAIL": _A.UNVERIFIED_EMAIL,
        "USER_NOT_FOUND": _A.USER_NOT_FOUND,
        "WEAK_PASSWORD": _A.INVALID_PASSWORD,
    }
)
