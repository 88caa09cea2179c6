"""Application service: Check Driver use case.

Turns plain input values into a domain Driver, runs the validator and
maps every violation into a DTO.
"""

from __future__ import annotations

import logging

from eligibility.application.dto import DriverSpec, EligibilityReportDTO, ViolationDTO
from eligibility.domain.exceptions import ValidationError
from eligibility.domain.model.driver import Driver, Licence, LicenceType
from eligibility.domain.model.errors import DriverError
from eligibility.domain.service.validator import Validator

logger = logging.getLogger(__name__)


class CheckDriverHandler:

    def __init__(self, validator: Validator[Driver, DriverError]) -> None:
        self._validator = validator

    def handle(self, spec: DriverSpec) -> EligibilityReportDTO:
        """Validate the driver described by *spec*.

        A licence is only built when both its category and its
        expiration are given; supplying just one of them is an error.
        """
        driver = self._to_driver(spec)
        errors = self._validator.validate(driver)
        logger.info("Checked driver aged %d: %d violations", driver.age, len(errors))
        return self._to_dto(errors)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_driver(spec: DriverSpec) -> Driver:
        if (spec.licence_type is None) != (spec.licence_expiration is None):
            raise ValidationError(
                "Licence category and expiration must be given together"
            )

        licence = None
        if spec.licence_type is not None:
            licence = Licence(
                licence_type=LicenceType.parse(spec.licence_type),
                expiration=spec.licence_expiration,  # type: ignore[arg-type]
            )

        return Driver(
            age=spec.age,
            alcohol_in_blood=spec.alcohol_in_blood,
            licence=licence,
        )

    @staticmethod
    def _to_dto(errors: list[DriverError]) -> EligibilityReportDTO:
        return EligibilityReportDTO(
            eligible=not errors,
            violations=[
                ViolationDTO(code=error.code, message=str(error))
                for error in errors
            ],
        )
