import logging
import logging.config
import os

import yaml


def setup_logging(level=logging.INFO, name="airportinfo", path=None):
    if path is None:
        path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logging.yaml")
    try:
        with open(path, "rt") as f:
            configurations = yaml.safe_load(f.read())
        logging.config.dictConfig(configurations)
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logging.basicConfig(level=level)
        logging.getLogger(name).warning(f"Error in logging configuration ({e}). Using default configs")
    log = logging.getLogger(name)
    log.debug("logger has been initiated")
    return log
