import logging

import pytest

from girocode import Epc
from girocode.logger import LIB_LOGGER_NAME

VALID_IBAN = "DE02120300000000202051"
CODEBERG_IBAN = "DE90 8306 5408 0004 1042 42"
VALID_RF = "RF18539007547034"


@pytest.fixture(autouse=True)
def reset_library_logger():
    """Drops handlers/levels installed by setup_logging() between tests."""
    yield
    root = logging.getLogger(LIB_LOGGER_NAME)
    for handler in root.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.NOTSET)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(LIB_LOGGER_NAME + "."):
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def minimal_builder():
    """Builder holding only the mandatory fields."""
    return Epc.builder().beneficiary("Alice").iban(VALID_IBAN)


@pytest.fixture
def codeberg_builder():
    """Fully populated version 001 builder (BIC mandatory)."""
    return (
        Epc.builder()
        .version("001")
        .character_set(1)
        .identification("SCT")
        .bic("GENODEF1SLR")
        .beneficiary("Codeberg e.V.")
        .iban(CODEBERG_IBAN)
        .amount("999999999.99")
        .purpose("BENE")
        .text("cash rules everything around me")
        .information("thanks")
    )
