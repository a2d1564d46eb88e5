import json
import logging
from contextlib import closing
from typing import Any, Dict, Optional

from requests import Response, codes, get

from airportinfo.codes import FAA_LID, IATA, ICAO, LID, TC_LID, LookupCode, lid_rule, validate_code
from airportinfo.config import common_conf
from airportinfo.errors import AirportApiHttpError, InvalidCodeError

logger = logging.getLogger(__name__)


class AirportInfo(object):
    """Looks up airport data from the ICAO doc7910 airport locations API.

    Every lookup is a single blocking request: the code is validated, the
    request url is built with the api key embedded, the response is checked
    and its outer JSON array is unwrapped into a bare object string.
    """

    def __init__(
        self,
        api_key: str,
        api_url: Optional[str] = None,
        image_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._api_key = api_key
        self.api_url = api_url or common_conf.api_url
        self.image_url = image_url or common_conf.image_url
        self.timeout = timeout if timeout is not None else common_conf.timeout

    @property
    def api_key(self) -> str:
        return self._api_key

    def find_by_icao(self, code: str) -> str:
        """Finds an airport by its 4 character ICAO code. Returns the JSON string of the airport record."""
        if not validate_code(ICAO, code):
            raise InvalidCodeError("Invalid ICAO Code")

        return self._find(LookupCode(code.upper(), ICAO))

    def find_by_iata(self, code: str) -> str:
        """Finds an airport by its 3 character IATA code. Returns the JSON string of the airport record."""
        if not validate_code(IATA, code):
            raise InvalidCodeError("Invalid IATA Code")

        return self._find(LookupCode(code.upper(), IATA))

    def find_by_lid(self, code: str, authority: str) -> str:
        """Finds an airport by a local identifier issued by the FAA or Transport Canada (TC)."""
        rule = lid_rule(authority)
        if rule is None:
            raise InvalidCodeError("Invalid LID Authority")
        if not validate_code(rule, code):
            raise InvalidCodeError("Invalid LID Code")

        return self._find(LookupCode(code.upper(), LID))

    def get_airport_image(self, code: str, code_type: str) -> bytes:
        """Returns the raw image bytes of an airport.

        The doc7910 service has no image endpoint, so an ``image_url`` must be
        configured; it receives the same query string as a record lookup.
        """
        code_type = code_type.upper()
        if code_type == LID:
            valid = validate_code(FAA_LID, code) or validate_code(TC_LID, code)
        elif code_type in (ICAO, IATA):
            valid = validate_code(code_type, code)
        else:
            raise InvalidCodeError("Invalid Code Type!")

        if not valid:
            raise InvalidCodeError(f"Invalid {code_type} Code")

        if not self.image_url:
            raise NotImplementedError("No airport image endpoint is configured")

        url = self._build_api_call(code, code_type, self.image_url)
        logger.debug(f"Requesting image for {code_type} code {code.upper()}")
        return self._get_web_content(url)

    def _find(self, lookup: LookupCode) -> str:
        url = self._build_api_call(lookup.code, lookup.code_type, self.api_url)
        logger.debug(f"Looking up airport for {lookup.code_type} code {lookup.code}")
        return convert_to_json_string(self._get_web_response(url))

    def _build_api_call(self, code: str, code_type: str, api_url: str) -> str:
        code_type = code_type.upper()
        code = code.upper()

        # IATA and LID lookups share the ICAO query string; the service filters on "airports".
        if code_type not in (ICAO, IATA, LID):
            raise InvalidCodeError("Invalid Code Type!")

        return f"{api_url}?api_key={self._api_key}&airports={code}&format=json"

    def _get_web_response(self, url: str) -> str:
        with closing(get(url, timeout=self.timeout)) as response:
            check_response(response)
            return response.text

    def _get_web_content(self, url: str) -> bytes:
        with closing(get(url, timeout=self.timeout)) as response:
            check_response(response)
            return response.content


def check_response(response: Response) -> None:
    if response.status_code != codes.ok:
        logger.error(f"Airport API request failed. Status code is {response.status_code} {response.reason}.")
        raise AirportApiHttpError(response.status_code, response.reason)


def convert_to_json_string(json_data: str) -> str:
    """Converts a JSON array string to a JSON object string by deleting every bracket"""
    return json_data.replace("[", "").replace("]", "")


def parse_record(record: str) -> Dict[str, Any]:
    return json.loads(record)
