"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/serializer.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Renders a validated Epc into the line-ordered payload text of
                the EPC069-12 guideline and encodes it for QR renderers.
                Reference: https://de.wikipedia.org/wiki/EPC-QR-Code
------------------------------------------------------------------------------
"""

from typing import List

from girocode.exceptions import InvalidFormat, TextTooLong
from girocode.logger import get_logger
from girocode.models.amount import CURRENCY
from girocode.models.epc import Epc

logger = get_logger("serializer")

MAX_PAYLOAD_BYTES = 331
LINE_SEPARATOR = "\n"


def payload_lines(epc: Epc) -> List[str]:
    """
    Returns the twelve payload lines. Absent optional fields stay as empty
    lines, positions never shift.
    """
    remittance = epc.remittance
    amount = epc.amount
    purpose = epc.purpose
    return [
        epc.service_tag.value,                                # Service Tag
        epc.version.value,                                    # Version
        epc.character_set.value,                              # Character Set
        epc.identification.value,                             # Identification code
        epc.bic or "",                                        # BIC
        epc.beneficiary,                                      # Payee Name
        str(epc.iban),                                        # Payee IBAN
        f"{CURRENCY}{amount}" if amount is not None else "",  # Amount prefixed with currency
        str(purpose) if purpose is not None else "",          # Purpose Code
        remittance.reference_line if remittance else "",      # Structured Reference
        remittance.text_line if remittance else "",           # Unstructured Remittance text
        epc.information or "",                                # Information
    ]


def serialize(epc: Epc) -> str:
    """Generates the raw text payload. No trailing line separator."""
    return LINE_SEPARATOR.join(payload_lines(epc))


def encode(epc: Epc) -> bytes:
    """
    Encodes the payload in the character set declared in its header.

    Raises:
        InvalidFormat: A text field has characters the character set lacks.
    """
    payload = serialize(epc)
    codec = epc.character_set.codec
    try:
        return payload.encode(codec)
    except UnicodeEncodeError as e:
        raise InvalidFormat(
            f"Character {payload[e.start:e.end]!r} cannot be encoded in {codec}",
            field="character_set"
        ) from e


def check_payload(epc: Epc) -> None:
    """
    Verifies the encoded payload fits into an EPC QR code.

    Raises:
        InvalidFormat: Payload is not encodable in its character set.
        TextTooLong: Payload exceeds 331 bytes.
    """
    size = len(encode(epc))
    if size > MAX_PAYLOAD_BYTES:
        raise TextTooLong(
            f"Payload has {size} bytes, EPC QR codes allow {MAX_PAYLOAD_BYTES}",
            field="payload"
        )
    logger.debug(f"Payload size {size}/{MAX_PAYLOAD_BYTES} bytes ({epc.character_set.codec})")
