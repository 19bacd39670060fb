import random

import pytest

from snarknode.block_requests import (
    Abort,
    AbortAndDisconnect,
    BlockRequestProceed,
    Case,
    Proceed,
    handle_block_requests,
)
from snarknode.environment import client

ITERATIONS = 50
ENV = client(2)
MFD = ENV.maximum_fork_depth


@pytest.fixture
def rng():
    return random.Random(20211130)


def _peer_ip(rng):
    return f"127.0.0.1:{rng.randrange(0, 65536)}"


def test_block_requests_case_0(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(1000, 5000000)
        peer_height = latest + 1
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), None, peer_height, peer_height, peer_height, None
        )
        assert result == Abort(Case.ZERO)


def test_block_requests_case_1(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(1000, 5000000)
        peer_height = rng.randrange(1, latest)
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), None, peer_height, peer_height, peer_height, None
        )
        assert result == Abort(Case.ONE)


def test_block_requests_case_2a(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(1, 1000)
        peer_height = rng.randrange(latest, latest * 2)
        mca = latest
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), None, peer_height, peer_height, mca, mca + 1
        )
        # Equal weights fall under case 1, which the source accepts here too.
        if peer_height == latest:
            assert result == Abort(Case.ONE)
        else:
            assert result == Abort(Case.TWO_A)


def test_block_requests_case_2b(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(1, 1000)
        peer_height = rng.randrange(latest + 1, (latest + 1) * 2)
        mca = latest
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), False, peer_height, peer_height, mca, mca + 1
        )
        count = min(peer_height - latest, ENV.maximum_block_request)
        start = latest + 1
        assert result == Proceed(
            Case.TWO_B,
            BlockRequestProceed(
                start_block_height=start,
                end_block_height=start + count - 1,
                ledger_is_on_fork=False,
            ),
        )


def test_block_requests_case_2ca(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(MFD + 1, MFD * 2)
        peer_height = rng.randrange(latest + 1, latest * 2)
        mca = rng.randrange(max(latest - MFD, 0), latest - 1)
        deviating = rng.randrange(mca + 1, latest)
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), True, peer_height, peer_height, mca, deviating
        )
        count = min(peer_height - mca, ENV.maximum_block_request)
        start = mca + 1
        assert result == Proceed(
            Case.TWO_CA,
            BlockRequestProceed(
                start_block_height=start,
                end_block_height=start + count - 1,
                ledger_is_on_fork=True,
            ),
        )


def test_block_requests_case_2cba(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(MFD + 3, MFD * 2)
        peer_height = rng.randrange(latest + 1, latest * 2)
        beyond = latest - MFD
        mca = rng.randrange(0, beyond // 2)
        deviating = rng.randrange(mca + 1, beyond)
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), True, peer_height, peer_height, mca, deviating
        )
        assert result == AbortAndDisconnect(Case.TWO_CBA, "exceeded fork range")


def test_block_requests_case_2cbb(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(MFD + 1, MFD * 2)
        peer_height = rng.randrange(latest + 1, latest * 2)
        beyond = latest - MFD
        mca = rng.randrange(0, beyond)
        deviating = rng.randrange(beyond + 1, latest)
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), True, peer_height, peer_height, mca, deviating
        )
        count = min(peer_height - mca, ENV.maximum_block_request)
        start = mca + 1
        assert result == Proceed(
            Case.TWO_CBB,
            BlockRequestProceed(
                start_block_height=start,
                end_block_height=start + count - 1,
                ledger_is_on_fork=True,
            ),
        )


def test_block_requests_case_2cc(rng):
    for _ in range(ITERATIONS):
        latest = rng.randrange(MFD + 1, MFD * 2)
        peer_height = rng.randrange(latest + 1, latest * 2)
        mca = rng.randrange(0, latest - MFD)
        result = handle_block_requests(
            ENV, latest, latest, _peer_ip(rng), True, peer_height, peer_height, mca, None
        )
        assert result == Abort(Case.TWO_CC)


def test_case_2b_without_deviating_locator_starts_from_common_ancestor():
    result = handle_block_requests(ENV, 10, 10, "127.0.0.1:4132", False, 20, 20, 5, None)
    assert result == Proceed(
        Case.TWO_B,
        BlockRequestProceed(start_block_height=6, end_block_height=20, ledger_is_on_fork=False),
    )


def test_case_2ca_at_common_ancestor_does_not_revert():
    result = handle_block_requests(ENV, 10, 10, "127.0.0.1:4132", True, 20, 20, 10, None)
    assert isinstance(result, Proceed)
    assert result.case is Case.TWO_CA
    assert result.proceed.ledger_is_on_fork is False
    assert result.proceed.start_block_height == 11


def test_request_count_is_capped_by_maximum_block_request():
    result = handle_block_requests(ENV, 10, 10, "127.0.0.1:4132", False, 100000, 100000, 10, 11)
    assert isinstance(result, Proceed)
    span = result.proceed.end_block_height - result.proceed.start_block_height + 1
    assert span == ENV.maximum_block_request


def test_peer_below_common_ancestor_raises():
    with pytest.raises(ValueError):
        handle_block_requests(ENV, 10, 10, "127.0.0.1:4132", False, 5, 20, 3, 4)