"""Tests de la classification des réponses du service."""

import logging

import pytest
import requests

from conftest import FakeResponse, FakeSession
from gazettematch.client import EmptyResult, MatchClient, MatchSuccess, TransportFailure
from gazettematch.request import build_match_request
from gazettematch.validation import UploadFile

ENDPOINT = "https://matcher.example.org/match"


@pytest.fixture
def request_(excel_file: UploadFile, pdf_file: UploadFile):
    return build_match_request(excel_file, pdf_file, 90, ENDPOINT)


def test_success_keeps_order(request_, two_matches) -> None:
    session = FakeSession(FakeResponse(payload=two_matches))
    outcome = MatchClient(session=session, timeout=5).submit(request_)
    assert isinstance(outcome, MatchSuccess)
    assert [r.score for r in outcome.records] == [100, 92]


def test_single_post_with_multipart_and_threshold(request_, two_matches) -> None:
    session = FakeSession(FakeResponse(payload=two_matches))
    MatchClient(session=session, timeout=5).submit(request_)
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == ENDPOINT
    assert call["params"] == {"threshold": "90"}
    assert set(call["files"]) == {"excel", "pdf"}
    assert call["timeout"] == 5


@pytest.mark.parametrize("payload", [{"matched": []}, {}, {"matched": None}, {"matched": "none"}, {"matched": {}}])
def test_empty_result(request_, payload) -> None:
    outcome = MatchClient(session=FakeSession(FakeResponse(payload=payload))).submit(request_)
    assert outcome == EmptyResult()


@pytest.mark.parametrize("status", [400, 404, 500, 502])
def test_non_success_status_is_failure(request_, two_matches, status: int) -> None:
    """Statut non 2xx : échec, même si le corps contient des correspondances."""
    session = FakeSession(FakeResponse(status_code=status, payload=two_matches))
    outcome = MatchClient(session=session).submit(request_)
    assert isinstance(outcome, TransportFailure)
    assert str(status) in outcome.detail


def test_unparseable_body_is_failure(request_) -> None:
    session = FakeSession(FakeResponse(text="<html>Bad gateway</html>"))
    assert isinstance(MatchClient(session=session).submit(request_), TransportFailure)


def test_non_object_body_is_failure(request_) -> None:
    session = FakeSession(FakeResponse(payload=[{"score": 100}]))
    assert isinstance(MatchClient(session=session).submit(request_), TransportFailure)


def test_record_without_score_is_failure(request_) -> None:
    session = FakeSession(FakeResponse(payload={"matched": [{"excelName": "a", "gazetteMatch": "A"}]}))
    assert isinstance(MatchClient(session=session).submit(request_), TransportFailure)


def test_network_error_is_failure_without_retry(request_, caplog) -> None:
    session = FakeSession(exc=requests.ConnectionError("connection refused"))
    with caplog.at_level(logging.WARNING, logger="gazettematch.client"):
        outcome = MatchClient(session=session).submit(request_)
    assert isinstance(outcome, TransportFailure)
    assert "connection refused" in outcome.detail
    assert len(session.calls) == 1
    assert "connection refused" in caplog.text


def test_timeout_is_failure(request_) -> None:
    session = FakeSession(exc=requests.Timeout("read timed out"))
    assert isinstance(MatchClient(session=session).submit(request_), TransportFailure)
