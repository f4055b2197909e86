# tests/test_api.py
"""
FastAPI 엔드포인트 테스트 (TestClient).

검증 대상:
- /health, /draft, /run, /validate, /minify 정상 응답
- 파싱 에러 → 422 ProblemDetails (code / target / meta.line)
- 입력 크기 제한 → 413 ProblemDetails
"""
import pytest
from fastapi.testclient import TestClient

from phonet.api.main import app

EXAMPLE = "~<>\n$_ = [ptkaeiou]\n* Some note\n+ ^ <_>+ $\n?+ kato\n?! x10\n"


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_draft_summary(client):
    response = client.post("/draft", json={"descriptor": EXAMPLE})
    assert response.status_code == 200

    body = response.json()
    assert body["mode"] == "<>"
    assert body["ruleCount"] == 1
    assert body["testCount"] == 2
    assert body["classes"] == {"_": "[ptkaeiou]"}
    assert body["rules"][0] == {
        "line": 4,
        "intent": True,
        "pattern": "^<_>+$",
        "expandedPattern": "^(?:[ptkaeiou])+$",
        "note": "Some note",
    }


def test_run(client):
    response = client.post("/run", json={"descriptor": EXAMPLE})
    assert response.status_code == 200

    body = response.json()
    assert body["failCount"] == 2
    assert body["testCount"] == 2
    assert body["messages"] == [
        {"kind": "info", "note": "Some note"},
        {
            "kind": "test",
            "word": "kato",
            "expectInvalid": True,
            "passed": False,
            "failKind": "ShouldBeInvalid",
        },
        {
            "kind": "test",
            "word": "x10",
            "expectInvalid": False,
            "passed": False,
            "failKind": "CustomReason",
            "reason": "Some note",
        },
    ]


def test_run_with_inline_tests(client):
    response = client.post("/run", json={"descriptor": EXAMPLE, "tests": ["pat", "xyz"]})
    body = response.json()
    assert body["testCount"] == 2
    assert body["failCount"] == 1
    assert [m["passed"] for m in body["messages"]] == [True, False]


def test_validate(client):
    response = client.post(
        "/validate", json={"descriptor": EXAMPLE, "words": ["kato", "x10"]}
    )
    assert response.status_code == 200
    assert response.json() == {
        "results": [
            {"word": "kato", "valid": True, "note": None},
            {"word": "x10", "valid": False, "note": "Some note"},
        ]
    }


def test_minify(client):
    response = client.post(
        "/minify", json={"descriptor": EXAMPLE, "with_tests": True}
    )
    assert response.status_code == 200
    assert response.json() == {"minified": "~<>;+^(?:[ptkaeiou])+$;?+kato;?!x10"}


def test_parse_error_problem_details(client):
    response = client.post("/run", json={"descriptor": "$x=a\n$x=b"})
    assert response.status_code == 422

    problem = response.json()
    assert problem["status"] == 422
    assert problem["type"] == "urn:phonet:problem:descriptor-parse-error"
    assert problem["error_class"] == "user_input"
    error = problem["errors"][0]
    assert error["code"] == "ClassAlreadyExists"
    assert error["target"] == "line:2"
    assert error["meta"] == {"line": 2, "value": "x", "errorClass": "user_input"}


def test_descriptor_too_large(client, monkeypatch):
    monkeypatch.setenv("PHONET_MAX_DESCRIPTOR_CHARS", "10")
    response = client.post("/draft", json={"descriptor": EXAMPLE})
    assert response.status_code == 413
    problem = response.json()
    assert problem["type"] == "urn:phonet:problem:payload-too-large"
    assert problem["errors"][0]["target"] == "descriptor"
    assert problem["errors"][0]["meta"]["errorClass"] == "user_input"


def test_word_too_long(client, monkeypatch):
    monkeypatch.setenv("PHONET_MAX_WORD_CHARS", "3")
    response = client.post(
        "/validate", json={"descriptor": EXAMPLE, "words": ["ab", "abcd"]}
    )
    assert response.status_code == 413
    assert response.json()["errors"][0]["meta"]["actual"] == 4
