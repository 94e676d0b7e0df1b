from features.whatsapp.model.business.business_profile import DEFAULT_PROFILE_FIELDS, BusinessProfile, BusinessProfileUpdate
from features.whatsapp.model.business.message_template import MessageTemplate, TemplateCreateRequest, TemplateCreateResponse
from features.whatsapp.model.business.phone_number import PhoneNumber
from features.whatsapp.model.outbound.message_request import MESSAGING_PRODUCT
from features.whatsapp.model.response import SuccessResponse
from features.whatsapp.sdk.graph_api_transport import GraphAPITransport
from util.config import Config
from util.error_codes import (
    BUSINESS_PROFILE_NOT_FOUND,
    EXTERNAL_OPERATION_REJECTED,
    INVALID_TWO_STEP_PIN,
    MISSING_BUSINESS_ACCOUNT_ID,
    MISSING_TEMPLATE_NAME,
    TEMPLATE_NOT_FOUND,
)
from util.errors import ConfigurationError, ExternalServiceError, NotFoundError, ValidationError
from util.log import Logger


class WhatsAppBusinessAPI:
    """
    Business profile, phone number and template management.
    https://developers.facebook.com/docs/whatsapp/business-management-api
    """
    __config: Config
    __log: Logger
    __transport: GraphAPITransport

    def __init__(self, config: Config, log: Logger, transport: GraphAPITransport):
        self.__config = config
        self.__log = log
        self.__transport = transport

    def get_business_profile(self, fields: list[str] | None = None) -> BusinessProfile:
        self.__log.t("Fetching the business profile")
        params = {"fields": ",".join(fields or DEFAULT_PROFILE_FIELDS)}
        response = self.__transport.get(self.__config.business_profile_url, params = params)
        profiles = response.get("data") or []
        if not profiles:
            raise NotFoundError("No business profile returned", BUSINESS_PROFILE_NOT_FOUND)
        return BusinessProfile.model_validate(profiles[0])

    def update_business_profile(self, profile: BusinessProfileUpdate) -> SuccessResponse:
        self.__log.t("Updating the business profile")
        payload = {"messaging_product": MESSAGING_PRODUCT, **profile.model_dump(exclude_none = True)}
        response = self.__transport.post(self.__config.business_profile_url, payload)
        return self.__require_success(response, "Business profile update")

    def get_phone_numbers(self) -> list[PhoneNumber]:
        url = self.__business_account_url("phone_numbers")
        self.__log.t("Fetching phone numbers of the business account")
        response = self.__transport.get(url)
        return [PhoneNumber.model_validate(item) for item in response.get("data") or []]

    def get_phone_number(self, phone_number_id: str | None = None) -> PhoneNumber:
        url = self.__config.api_url(phone_number_id) if phone_number_id else self.__config.phone_number_url
        self.__log.t(f"Fetching phone number #{phone_number_id or self.__config.phone_number_id}")
        return PhoneNumber.model_validate(self.__transport.get(url))

    def get_templates(self) -> list[MessageTemplate]:
        url = self.__business_account_url("message_templates")
        self.__log.t("Fetching message templates")
        response = self.__transport.get(url)
        return [MessageTemplate.model_validate(item) for item in response.get("data") or []]

    def get_template(self, name: str) -> MessageTemplate:
        if not name:
            raise ValidationError("name", "template name must not be empty", MISSING_TEMPLATE_NAME)
        url = self.__business_account_url("message_templates")
        self.__log.t(f"Fetching message template '{name}'")
        response = self.__transport.get(url, params = {"name": name})
        for item in response.get("data") or []:
            template = MessageTemplate.model_validate(item)
            if template.name == name:
                return template
        raise NotFoundError(f"Template '{name}' not found", TEMPLATE_NOT_FOUND)

    def create_template(self, request: TemplateCreateRequest) -> TemplateCreateResponse:
        request.validate_request()
        url = self.__business_account_url("message_templates")
        self.__log.t(f"Creating message template '{request.name}'")
        response = self.__transport.post(url, request.model_dump(exclude_none = True))
        return TemplateCreateResponse.model_validate(response)

    def delete_template(self, name: str) -> SuccessResponse:
        if not name:
            raise ValidationError("name", "template name must not be empty", MISSING_TEMPLATE_NAME)
        url = self.__business_account_url("message_templates")
        self.__log.t(f"Deleting message template '{name}'")
        response = self.__transport.delete(url, params = {"name": name})
        return self.__require_success(response, f"Template '{name}' deletion")

    def set_two_step_pin(self, pin: str) -> SuccessResponse:
        if len(pin) != 6 or not pin.isdigit():
            raise ValidationError("pin", "PIN must be exactly 6 digits", INVALID_TWO_STEP_PIN)
        self.__log.t("Setting the two-step verification PIN")
        response = self.__transport.post(self.__config.phone_number_url, {"pin": pin})
        return self.__require_success(response, "Two-step PIN update")

    def __business_account_url(self, edge: str) -> str:
        if not self.__config.business_account_id:
            raise ConfigurationError("WHATSAPP_BUSINESS_ACCOUNT_ID is required", MISSING_BUSINESS_ACCOUNT_ID)
        return self.__config.business_account_url(edge)

    def __require_success(self, response: dict, operation: str) -> SuccessResponse:
        result = SuccessResponse.model_validate(response)
        if not result.success:
            raise ExternalServiceError(self.__log.e(f"{operation} was rejected"), EXTERNAL_OPERATION_REJECTED)
        return result
