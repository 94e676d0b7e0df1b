# Local error codes, grouped by category range.

# Validation (1000-1999)
MISSING_RECIPIENT = 1001
MISSING_TEXT_BODY = 1002
MISSING_REPLY_MESSAGE_ID = 1003
MISSING_MEDIA_SOURCE = 1004
INVALID_LOCATION = 1005
MISSING_CONTACTS = 1006
MISSING_CONTACT_NAME = 1007
MISSING_REACTION_MESSAGE_ID = 1008
INVALID_BUTTON_COUNT = 1009
MISSING_BUTTON_FIELDS = 1010
MISSING_LIST_SECTIONS = 1011
EMPTY_LIST_SECTION = 1012
MISSING_LIST_BUTTON_TEXT = 1013
MISSING_CTA_FIELDS = 1014
MISSING_TEMPLATE_NAME = 1015
MISSING_TEMPLATE_LANGUAGE = 1016
INVALID_TEMPLATE_PARAMETER = 1017
MISSING_INTERACTIVE_BODY = 1018
MISSING_PRODUCT_FIELDS = 1019
MISSING_FLOW_FIELDS = 1020
MISSING_MESSAGE_ID = 1021
UNSUPPORTED_MEDIA_TYPE = 1022
MEDIA_TOO_LARGE = 1023
MISSING_MEDIA_CONTENT = 1024
INVALID_TWO_STEP_PIN = 1025
MISSING_TEMPLATE_FIELDS = 1026
WEBHOOK_PAYLOAD_INVALID = 1027
MISSING_MEDIA_ID = 1028
MISSING_HEADER_CONTENT = 1029

# Not Found (2000-2999)
TEMPLATE_NOT_FOUND = 2001
BUSINESS_PROFILE_NOT_FOUND = 2002
MEDIA_FILE_NOT_FOUND = 2003

# Authorization (3000-3999)
WEBHOOK_SIGNATURE_MISMATCH = 3001
WEBHOOK_VERIFICATION_FAILED = 3002

# External Service (5000-5999)
EXTERNAL_REQUEST_FAILED = 5001
EXTERNAL_EMPTY_RESPONSE = 5002
EXTERNAL_UNEXPECTED_RESPONSE = 5003
EXTERNAL_OPERATION_REJECTED = 5004

# Configuration (7000-7999)
MISSING_PHONE_NUMBER_ID = 7001
MISSING_ACCESS_TOKEN = 7002
MISSING_VERIFY_TOKEN = 7003
MISSING_BUSINESS_ACCOUNT_ID = 7004

# Internal (8000-8999)
DISPATCHER_SHUT_DOWN = 8001


class Upstream:
    """https://developers.facebook.com/docs/whatsapp/cloud-api/support/error-codes"""

    INVALID_PARAMETER = 100
    ACCESS_TOKEN_EXPIRED = 190
    PERMISSION_DENIED = 200
    API_PERMISSION = 10
    RATE_LIMIT_HIT = 80007
    PAIR_RATE_LIMIT_HIT = 130429
    MESSAGE_UNDELIVERABLE = 131026
    RE_ENGAGEMENT_MESSAGE = 131047
    RECIPIENT_NOT_ALLOWED = 131030
    MEDIA_DOWNLOAD_ERROR = 131052
    TEMPLATE_PARAM_COUNT_MISMATCH = 132000
    TEMPLATE_NOT_EXISTS = 132001
    TEMPLATE_TEXT_TOO_LONG = 132005

    RATE_LIMIT_CODES = (RATE_LIMIT_HIT, PAIR_RATE_LIMIT_HIT)
    PERMISSION_CODES = (API_PERMISSION, PERMISSION_DENIED)
    AUTH_ERROR_TYPE = "OAuthException"
