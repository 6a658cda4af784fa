#!/usr/bin/env python3
"""Tests for the SMTP notifier."""

import smtplib
import ssl

import pytest

import notifier as notifier_module
from models import ConfigError, SendError
from notifier import MailConfig, Notifier


class FakeSMTP:
    """Records calls made by Notifier instead of talking to a server."""

    instances = []
    extensions = {"starttls"}
    fail_on_send = None

    def __init__(self, host, port, context=None):
        self.host = host
        self.port = port
        self.context = context
        self.calls = []
        self.sent = []
        FakeSMTP.instances.append(self)

    def ehlo(self):
        self.calls.append("ehlo")

    def has_extn(self, name):
        return name in self.extensions

    def starttls(self, context=None):
        self.calls.append("starttls")
        self.context = context

    def login(self, user, password):
        self.calls.append(("login", user, password))

    def send_message(self, message):
        if FakeSMTP.fail_on_send is not None:
            raise FakeSMTP.fail_on_send
        self.sent.append(message)

    def quit(self):
        self.calls.append("quit")


class FakeSMTPSSL(FakeSMTP):
    pass


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.extensions = {"starttls"}
    FakeSMTP.fail_on_send = None
    monkeypatch.setattr(notifier_module.smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(notifier_module.smtplib, "SMTP_SSL", FakeSMTPSSL)
    return FakeSMTP


class TestMailConfig:
    """Tests for MailConfig."""

    def test_secure_only_on_465(self):
        assert MailConfig(host="smtp.test", port=465).secure
        assert not MailConfig(host="smtp.test", port=587).secure
        assert not MailConfig(host="smtp.test", port=25).secure

    def test_sender_falls_back_to_username(self):
        assert MailConfig(host="h", username="u@test").sender == "u@test"
        assert MailConfig(host="h", username="u@test", from_address="f@test").sender == "f@test"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SMTP_HOST", "smtp.test")
        monkeypatch.setenv("SMTP_PORT", "465")
        monkeypatch.setenv("SMTP_USER", "user@test")
        monkeypatch.setenv("SMTP_PASS", "secret")
        monkeypatch.setenv("SMTP_FROM", "reports@test")
        monkeypatch.setenv("SMTP_ALLOW_INSECURE_CERTS", "true")

        config = MailConfig.from_env()

        assert config == MailConfig(
            host="smtp.test",
            port=465,
            username="user@test",
            password="secret",
            from_address="reports@test",
            allow_insecure_certificates=True,
        )

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.setenv("SMTP_HOST", "smtp.test")
        for name in ("SMTP_PORT", "SMTP_USER", "SMTP_PASS", "SMTP_FROM", "SMTP_ALLOW_INSECURE_CERTS"):
            monkeypatch.delenv(name, raising=False)

        config = MailConfig.from_env()

        assert config.port == 587
        assert config.username is None
        assert config.allow_insecure_certificates is False

    def test_from_env_requires_host(self, monkeypatch):
        monkeypatch.delenv("SMTP_HOST", raising=False)
        with pytest.raises(ConfigError):
            MailConfig.from_env()

    def test_from_env_rejects_bad_port(self, monkeypatch):
        monkeypatch.setenv("SMTP_HOST", "smtp.test")
        monkeypatch.setenv("SMTP_PORT", "smtp")
        with pytest.raises(ValueError):
            MailConfig.from_env()


class TestNotifierSend:
    """Tests for Notifier.send."""

    def test_starttls_on_submission_port(self, fake_smtp):
        config = MailConfig(host="smtp.test", port=587, username="u@test", password="pw")
        Notifier(config).send("fleet@test", "Subject", "<p>hi</p>")

        server = fake_smtp.instances[0]
        assert type(server) is FakeSMTP
        assert (server.host, server.port) == ("smtp.test", 587)
        assert "starttls" in server.calls
        assert ("login", "u@test", "pw") in server.calls
        assert server.calls[-1] == "quit"

    def test_plaintext_when_starttls_not_offered(self, fake_smtp):
        fake_smtp.extensions = set()
        Notifier(MailConfig(host="smtp.test", port=25)).send("a@test", "S", "<p/>")
        assert "starttls" not in fake_smtp.instances[0].calls

    def test_implicit_tls_on_465(self, fake_smtp):
        Notifier(MailConfig(host="smtp.test", port=465)).send("a@test", "S", "<p/>")
        server = fake_smtp.instances[0]
        assert type(server) is FakeSMTPSSL
        assert "starttls" not in server.calls

    def test_skips_login_without_credentials(self, fake_smtp):
        Notifier(MailConfig(host="smtp.test")).send("a@test", "S", "<p/>")
        assert not any(isinstance(c, tuple) for c in fake_smtp.instances[0].calls)

    def test_message_headers_and_body(self, fake_smtp):
        config = MailConfig(host="smtp.test", username="u@test", from_address="reports@test")
        Notifier(config).send("fleet@test", "Vehicle Document Expiry Report - 2024-03", "<h2>Report</h2>")

        message = fake_smtp.instances[0].sent[0]
        assert message["From"] == "reports@test"
        assert message["To"] == "fleet@test"
        assert message["Subject"] == "Vehicle Document Expiry Report - 2024-03"
        html_part = message.get_payload()[0]
        assert html_part.get_content_type() == "text/html"
        assert "<h2>Report</h2>" in html_part.get_payload(decode=True).decode("utf-8")

    def test_insecure_certificates_disable_verification(self, fake_smtp):
        config = MailConfig(host="smtp.test", allow_insecure_certificates=True)
        Notifier(config).send("a@test", "S", "<p/>")
        context = fake_smtp.instances[0].context
        assert context.check_hostname is False
        assert context.verify_mode == ssl.CERT_NONE

    def test_certificates_verified_by_default(self, fake_smtp):
        Notifier(MailConfig(host="smtp.test")).send("a@test", "S", "<p/>")
        assert fake_smtp.instances[0].context.verify_mode == ssl.CERT_REQUIRED

    def test_rejected_message_raises_send_error(self, fake_smtp):
        fake_smtp.fail_on_send = smtplib.SMTPRecipientsRefused({"a@test": (550, b"no")})
        with pytest.raises(SendError):
            Notifier(MailConfig(host="smtp.test")).send("a@test", "S", "<p/>")
        assert fake_smtp.instances[0].calls[-1] == "quit"

    def test_unreachable_server_raises_send_error(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise ConnectionRefusedError("connection refused")

        monkeypatch.setattr(notifier_module.smtplib, "SMTP", refuse)
        with pytest.raises(SendError):
            Notifier(MailConfig(host="smtp.test")).send("a@test", "S", "<p/>")
