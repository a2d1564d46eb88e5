from airportinfo.client import AirportInfo, parse_record
from airportinfo.codes import LookupCode, validate_code
from airportinfo.errors import AirportApiHttpError, InvalidCodeError
