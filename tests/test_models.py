"""Tests for azwi.models."""

import hashlib
import re

import pytest
from pydantic import ValidationError

from azwi.config import DEFAULT_AUDIENCE
from azwi.models import (
    FederatedCredential,
    get_federated_credential_subject,
    new_federated_credential,
)


def _make_credential(**overrides) -> FederatedCredential:
    kwargs = {
        "object_id": "obj-123",
        "issuer": "https://issuer.example/",
        "subject": "system:serviceaccount:default:my-sa",
        "description": "Federated Service Account for default/my-sa",
        "audiences": [DEFAULT_AUDIENCE],
    }
    kwargs.update(overrides)
    return new_federated_credential(**kwargs)


class TestFederatedCredentialSubject:
    @pytest.mark.parametrize(
        "namespace,name,expected",
        [
            ("default", "my-sa", "system:serviceaccount:default:my-sa"),
            ("kube-system", "coredns", "system:serviceaccount:kube-system:coredns"),
            ("", "", "system:serviceaccount::"),
        ],
    )
    def test_subject_format(self, namespace, name, expected):
        assert get_federated_credential_subject(namespace, name) == expected


class TestFederatedCredential:
    def test_fields(self):
        fc = _make_credential()
        assert fc.object_id == "obj-123"
        assert fc.issuer == "https://issuer.example/"
        assert fc.audiences == ["api://AzureADTokenExchange"]

    def test_name_derived_from_subject(self):
        subject = "system:serviceaccount:default:my-sa"
        digest = hashlib.sha256(subject.encode("utf-8")).hexdigest()[:16]
        fc = _make_credential()
        assert fc.name == f"system-serviceaccount-default-my-sa-{digest}"

    def test_name_is_stable(self):
        assert _make_credential().name == _make_credential().name

    def test_name_truncated(self):
        fc = _make_credential(subject="system:serviceaccount:ns:" + "a" * 200)
        assert len(fc.name) == 120

    def test_name_only_valid_characters(self):
        fc = _make_credential(subject="system:serviceaccount:my.ns:sa_1")
        assert fc.name.startswith("system-serviceaccount-my-ns-sa-1-")
        assert re.fullmatch(r"[a-zA-Z0-9-]+", fc.name)

    def test_dotted_and_dashed_names_differ(self):
        dotted = _make_credential(subject=get_federated_credential_subject("default", "my.sa"))
        dashed = _make_credential(subject=get_federated_credential_subject("default", "my-sa"))
        assert dotted.name != dashed.name

    def test_long_subjects_sharing_prefix_differ(self):
        base = "system:serviceaccount:ns:" + "a" * 150
        first = _make_credential(subject=base + "-one")
        second = _make_credential(subject=base + "-two")
        assert first.subject[:120] == second.subject[:120]
        assert first.name != second.name
        assert len(first.name) == len(second.name) == 120

    def test_frozen(self):
        fc = _make_credential()
        with pytest.raises(ValidationError):
            fc.subject = "other"

    def test_requires_an_audience(self):
        with pytest.raises(ValidationError):
            _make_credential(audiences=[])

    def test_to_graph(self):
        body = _make_credential().to_graph()
        assert body.name == _make_credential().name
        assert body.issuer == "https://issuer.example/"
        assert body.subject == "system:serviceaccount:default:my-sa"
        assert body.description == "Federated Service Account for default/my-sa"
        assert body.audiences == [DEFAULT_AUDIENCE]
