from typing import IO, Any

import requests
from requests import RequestException, Response

from util.config import Config
from util.error_codes import EXTERNAL_EMPTY_RESPONSE, EXTERNAL_REQUEST_FAILED, EXTERNAL_UNEXPECTED_RESPONSE
from util.errors import APIError, ExternalServiceError
from util.log import Logger

DOWNLOAD_CHUNK_SIZE = 64 * 1024


class GraphAPITransport:
    """
    Authenticated HTTP round-trips against the Graph API. One logical request yields
    exactly one response or one error; nothing is retried or queued here.
    https://developers.facebook.com/docs/graph-api/overview
    """
    __config: Config
    __log: Logger
    __session: requests.Session

    def __init__(self, config: Config, log: Logger, session: requests.Session | None = None):
        config.validate()
        self.__config = config
        self.__log = log
        self.__session = session or requests.Session()

    def get(self, url: str, params: dict[str, Any] | None = None) -> dict:
        return self.__send("GET", url, params = params)

    def post(self, url: str, payload: dict[str, Any]) -> dict:
        return self.__send("POST", url, json = payload)

    def delete(self, url: str, params: dict[str, Any] | None = None) -> dict:
        return self.__send("DELETE", url, params = params)

    def post_multipart(self, url: str, data: dict[str, str], files: dict[str, tuple]) -> dict:
        return self.__send("POST", url, data = data, files = files)

    def download(self, url: str) -> tuple[bytes, str | None]:
        response = self.__request("GET", url)
        self.__log.t(f"  Downloaded {len(response.content)} bytes")
        return response.content, response.headers.get("Content-Type")

    def stream_to(self, url: str, destination: IO[bytes]) -> int:
        response = self.__request("GET", url, stream = True)
        written = 0
        try:
            for chunk in response.iter_content(chunk_size = DOWNLOAD_CHUNK_SIZE):
                if chunk:
                    destination.write(chunk)
                    written += len(chunk)
        except RequestException as e:
            raise ExternalServiceError("Media stream was interrupted", EXTERNAL_REQUEST_FAILED) from e
        finally:
            response.close()
        self.__log.t(f"  Streamed {written} bytes")
        return written

    def __send(self, method: str, url: str, **kwargs: Any) -> dict:
        response = self.__request(method, url, **kwargs)
        if not response.content:
            raise ExternalServiceError(self.__log.e(f"Empty response from {method} {url}"), EXTERNAL_EMPTY_RESPONSE)
        try:
            body = response.json()
        except ValueError as e:
            message = self.__log.e(f"Response from {method} {url} is not JSON")
            raise ExternalServiceError(message, EXTERNAL_UNEXPECTED_RESPONSE) from e
        if not isinstance(body, dict):
            raise ExternalServiceError(self.__log.e(f"Unexpected response shape from {url}"), EXTERNAL_UNEXPECTED_RESPONSE)
        # some endpoints answer 2xx with an embedded error
        if "error" in body:
            error = APIError.from_response(response.status_code, response.content)
            self.__log.e(f"  API reported an error for {method} {url}", error)
            raise error
        return body

    def __request(self, method: str, url: str, **kwargs: Any) -> Response:
        self.__log.t(f"{method} {url}")
        headers = {"Authorization": f"Bearer {self.__config.access_token.get_secret_value()}"}
        try:
            response = self.__session.request(
                method,
                url,
                headers = headers,
                timeout = self.__config.web_timeout_s,
                **kwargs,
            )
        except RequestException as e:
            message = f"Request {method} {url} failed"
            self.__log.e(message, e)
            raise ExternalServiceError(message, EXTERNAL_REQUEST_FAILED) from e
        self.__raise_for_status(response)
        return response

    def __raise_for_status(self, response: Response):
        if response.status_code < 200 or response.status_code > 299:
            error = APIError.from_response(response.status_code, response.content)
            self.__log.e(f"  Status is not '2xx': HTTP_{response.status_code}!", error.to_log_string())
            raise error
