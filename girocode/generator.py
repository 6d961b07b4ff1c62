"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/generator.py
Version:        2.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    One-call helper to generate SEPA Credit Transfer (EPC-QR)
                payloads, commonly known as "GiroCode".
------------------------------------------------------------------------------
"""

from decimal import Decimal
from typing import Optional, Union

from girocode.config import GiroCodeConfig
from girocode.logger import get_logger
from girocode.models.epc import Epc

logger = get_logger("generator")


class GiroCodeGenerator:
    """
    Generates the payload string for EPC-QR codes (SEPA Credit Transfer).
    Reference: https://de.wikipedia.org/wiki/EPC-QR-Code
    """

    @staticmethod
    def generate_payload(
        recipient_name: str,
        iban: str,
        amount: Union[str, int, Decimal, float, None] = None,
        purpose: str = "",
        bic: str = "",
        reference: Optional[str] = None,
        purpose_code: Optional[str] = None,
        information: Optional[str] = None,
        config: Optional[GiroCodeConfig] = None
    ) -> str:
        """
        Generates the raw text payload for a GiroCode.

        Args:
            recipient_name: Name of the payee (max 70 chars).
            iban: IBAN of the payee.
            amount: Amount in EUR, None lets the payer decide.
            purpose: Remittance information (text, max 140 chars).
            bic: BIC of the payee (optional for version 002).
            reference: Structured reference (RF-Standard, optional). Cannot be
                       combined with remittance text in `purpose`.
            purpose_code: Four letter SEPA purpose code (e.g. 'GDDS').
            information: Beneficiary to originator information (max 70 chars).
            config: Header defaults, see GiroCodeConfig.

        Returns:
            The EPC-QR compliant payload string.

        Raises:
            GiroCodeError: Any input violates the EPC rules.
        """
        builder = (
            Epc.builder(config)
            .beneficiary(recipient_name)
            .iban(iban)
            .amount(amount)
            .bic(bic)
            .purpose(purpose_code)
            .information(information)
            .reference(reference)
            .text(purpose)
        )

        payload = str(builder.build())
        logger.debug(f"Generated GiroCode payload ({len(payload)} chars)")
        return payload
