"""Unit tests for permit validity evaluation."""

from dataclasses import replace

import pytest

from app.geometry.permits import PermitValidityEvaluator
from app.geometry.types import (
    Footprint,
    PermitRecord,
    PermitStatus,
    RequestStatus,
)
from conftest import at, make_record, window


@pytest.fixture
def evaluator():
    return PermitValidityEvaluator()


@pytest.fixture
def permit(origin, space_100m) -> PermitRecord:
    reservation = make_record("req-1", origin, 4, 3, window(9, 17))
    return PermitRecord(
        permit_id="permit-1",
        qr_payload="token",
        status=PermitStatus.VALID,
        valid_from=reservation.window.start,
        valid_to=reservation.window.end,
        reservation=reservation,
        space=space_100m,
    )


class TestPermitValidity:
    def test_all_checks_pass(self, evaluator, permit):
        result = evaluator.evaluate(permit, signature_valid=True, now=at(12))

        assert result.valid is True
        assert result.checks.to_dict() == {
            "permit_status": True,
            "time_validity": True,
            "request_status": True,
            "signature": True,
            "spatial_correctness": True,
        }
        assert result.evaluated_at == at(12)

    def test_rejected_reservation_alone_invalidates(self, evaluator, permit):
        rejected = replace(permit, reservation=replace(permit.reservation, status=RequestStatus.REJECTED))

        result = evaluator.evaluate(rejected, signature_valid=True, now=at(12))

        assert result.valid is False
        assert result.checks.request_status is False
        assert result.checks.permit_status is True
        assert result.checks.time_validity is True
        assert result.checks.signature is True

    def test_revoked_permit(self, evaluator, permit):
        result = evaluator.evaluate(replace(permit, status=PermitStatus.REVOKED), True, now=at(12))
        assert result.valid is False
        assert result.checks.permit_status is False

    @pytest.mark.parametrize("hour,expected", [(9, True), (17, True), (8, False), (18, False)])
    def test_time_window_is_closed(self, evaluator, permit, hour, expected):
        result = evaluator.evaluate(permit, signature_valid=True, now=at(hour))
        assert result.checks.time_validity is expected
        assert result.valid is expected

    def test_bad_signature(self, evaluator, permit):
        result = evaluator.evaluate(permit, signature_valid=False, now=at(12))
        assert result.valid is False
        assert result.checks.signature is False

    def test_footprint_outside_space(self, evaluator, permit, origin, point_at):
        moved = replace(
            permit,
            reservation=replace(permit.reservation, footprint=Footprint(point_at(150), 4, 3)),
        )

        result = evaluator.evaluate(moved, signature_valid=True, now=at(12))

        assert result.checks.spatial_correctness is False
        assert result.valid is False

    def test_standalone_permit_is_spatially_correct(self, evaluator, permit):
        result = evaluator.evaluate(replace(permit, space=None), signature_valid=True, now=at(12))
        assert result.checks.spatial_correctness is True

    def test_claims_are_carried(self, evaluator, permit):
        result = evaluator.evaluate(permit, True, now=at(12), claims={"sub": "permit-1"})
        assert result.claims == {"sub": "permit-1"}
