# incoming/tests/test_deposit_callback.py

import json
from concurrent.futures import Future
from unittest import mock
from urllib.error import HTTPError, URLError

from django.test import SimpleTestCase

from incoming.services.config import WebhookConfig
from incoming.services.deposit_callback import (
    DepositCallback,
    DepositCallbackProcessor,
    decode_deposit_callback,
)
from incoming.services.exceptions import (
    ForwardError,
    InvalidSignatureError,
    MalformedPayloadError,
)
from incoming.services.merchant import MerchantForwarder, call_merchant
from incoming.services.signature import compute_signature

SECRET = "whsec_deposit_test"
MERCHANT_URL = "https://merchant.example/incoming/tspay_deposit_callback"


class _InlineExecutor:
    """Runs submitted work immediately; records calls."""

    def __init__(self):
        self.calls = []

    def submit(self, fn, *args, **kwargs):
        self.calls.append((fn, args, kwargs))
        fut = Future()
        fut.set_result(fn(*args, **kwargs))
        return fut


class DecodeDepositCallbackTests(SimpleTestCase):
    def test_full_payload(self):
        body = json.dumps(
            {
                "type": "deposit",
                "transaction_id": "TX-42",
                "reference": "REF-1",
                "amount": 100.5,
                "fee": 1.5,
                "net_amount": 99,
                "currency": "USDT",
                "chain": "TRON",
                "status": "success",
                "wallet_address": {"address": "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb"},
                "kind": "crypto",
                "method": "onchain",
                "extra": "ignored",
            }
        ).encode()

        cb = decode_deposit_callback(body)

        self.assertEqual(cb.transaction_id, "TX-42")
        self.assertEqual(cb.net_amount, 99.0)
        self.assertEqual(cb.chain, "TRON")
        self.assertEqual(cb.wallet_address, {"address": "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb"})
        self.assertNotIn("extra", cb.to_dict())

    def test_missing_fields_get_zero_values(self):
        cb = decode_deposit_callback(b'{"transaction_id": "TX-1"}')

        self.assertEqual(
            cb.to_dict(),
            {
                "type": "",
                "transaction_id": "TX-1",
                "reference": "",
                "amount": 0.0,
                "fee": 0.0,
                "net_amount": 0.0,
                "currency": "",
                "chain": None,
                "status": "",
                "wallet_address": None,
                "kind": "",
                "method": "",
            },
        )

    def test_invalid_json(self):
        with self.assertRaises(MalformedPayloadError):
            decode_deposit_callback(b"{not json")

    def test_non_object_json(self):
        with self.assertRaises(MalformedPayloadError):
            decode_deposit_callback(b"[1, 2, 3]")

    def test_wrong_field_type(self):
        with self.assertRaises(MalformedPayloadError):
            decode_deposit_callback(b'{"amount": "lots"}')

    def test_numeric_text_field_is_not_coerced(self):
        with self.assertRaises(MalformedPayloadError):
            decode_deposit_callback(b'{"transaction_id": 12345}')

    def test_numeric_string_amount_is_rejected(self):
        with self.assertRaises(MalformedPayloadError):
            decode_deposit_callback(b'{"transaction_id": "TX-7", "amount": "100"}')

    def test_boolean_amount_is_rejected(self):
        with self.assertRaises(MalformedPayloadError):
            decode_deposit_callback(b'{"transaction_id": "TX-7", "fee": true}')

    def test_null_fields_decode_to_zero_values(self):
        cb = decode_deposit_callback(b'{"transaction_id": null, "amount": null, "fee": 2}')

        self.assertEqual(cb.transaction_id, "")
        self.assertEqual(cb.amount, 0.0)
        self.assertEqual(cb.fee, 2.0)


class DepositCallbackProcessorTests(SimpleTestCase):
    """
    GUARANTEES:
    - bad signature -> InvalidSignatureError, nothing forwarded
    - malformed body -> MalformedPayloadError, nothing forwarded
    - valid callback -> forwarded once to the configured merchant URL
    """

    def setUp(self):
        self.config = WebhookConfig(
            secret_deposit=SECRET,
            tolerance_seconds=300,
            merchant_deposit_url=MERCHANT_URL,
            forward_timeout=7,
        )
        self.sender = mock.Mock(return_value=200)
        self.executor = _InlineExecutor()
        self.forwarder = MerchantForwarder(self.config, executor=self.executor, sender=self.sender)
        self.processor = DepositCallbackProcessor(self.config, forwarder=self.forwarder)

    def _signed(self, body: bytes):
        ts = "1700000000"
        return body, compute_signature(SECRET, ts, body), ts

    @mock.patch("incoming.services.signature.time.time", return_value=1_700_000_010)
    def test_valid_callback_is_forwarded(self, _time):
        body, sig, ts = self._signed(b'{"transaction_id": "TX-9", "amount": 10}')

        cb = self.processor.process_deposit_callback(body, sig, ts)

        self.assertIsInstance(cb, DepositCallback)
        self.assertEqual(cb.transaction_id, "TX-9")
        self.sender.assert_called_once()
        args, kwargs = self.sender.call_args
        self.assertEqual(args[0], MERCHANT_URL)
        self.assertEqual(args[1]["transaction_id"], "TX-9")
        self.assertEqual(args[1]["amount"], 10.0)
        self.assertEqual(kwargs, {"timeout": 7})

    @mock.patch("incoming.services.signature.time.time", return_value=1_700_000_010)
    def test_invalid_signature_is_not_forwarded(self, _time):
        body, _sig, ts = self._signed(b'{"transaction_id": "TX-9"}')

        with self.assertRaises(InvalidSignatureError) as ctx:
            self.processor.process_deposit_callback(body, "deadbeef", ts)

        self.assertEqual(str(ctx.exception), "invalid signature")
        self.sender.assert_not_called()

    @mock.patch("incoming.services.signature.time.time", return_value=1_700_000_010)
    def test_mistyped_payload_is_not_forwarded(self, _time):
        body, sig, ts = self._signed(b'{"transaction_id": 12345, "amount": "100", "fee": true}')

        with self.assertRaises(MalformedPayloadError):
            self.processor.process_deposit_callback(body, sig, ts)

        self.sender.assert_not_called()

    @mock.patch("incoming.services.signature.time.time", return_value=1_700_000_010)
    def test_malformed_payload_is_not_forwarded(self, _time):
        body, sig, ts = self._signed(b"not-json")

        with self.assertRaises(MalformedPayloadError):
            self.processor.process_deposit_callback(body, sig, ts)

        self.sender.assert_not_called()

    @mock.patch("incoming.services.signature.time.time", return_value=1_700_000_010)
    def test_processor_does_not_wait_for_forward(self, _time):
        executor = mock.Mock()
        forwarder = MerchantForwarder(self.config, executor=executor, sender=self.sender)
        processor = DepositCallbackProcessor(self.config, forwarder=forwarder)
        body, sig, ts = self._signed(b'{"transaction_id": "TX-10"}')

        processor.process_deposit_callback(body, sig, ts)

        executor.submit.assert_called_once()
        self.sender.assert_not_called()

    def test_shut_down_executor_raises_forward_error(self):
        executor = mock.Mock()
        executor.submit.side_effect = RuntimeError("cannot schedule new futures after shutdown")
        forwarder = MerchantForwarder(self.config, executor=executor)

        with self.assertRaises(ForwardError):
            forwarder.forward({"transaction_id": "TX-1"})


class CallMerchantTests(SimpleTestCase):
    @mock.patch("incoming.services.merchant.urlopen")
    def test_posts_json(self, urlopen):
        resp = mock.MagicMock()
        resp.status = 200
        urlopen.return_value.__enter__.return_value = resp

        code = call_merchant(MERCHANT_URL, {"transaction_id": "TX-1"}, timeout=5)

        self.assertEqual(code, 200)
        req = urlopen.call_args.args[0]
        self.assertEqual(req.full_url, MERCHANT_URL)
        self.assertEqual(req.get_method(), "POST")
        self.assertEqual(req.get_header("Content-type"), "application/json")
        self.assertEqual(json.loads(req.data), {"transaction_id": "TX-1"})
        self.assertEqual(urlopen.call_args.kwargs["timeout"], 5)

    @mock.patch("incoming.services.merchant.urlopen")
    def test_http_error_status_is_returned(self, urlopen):
        urlopen.side_effect = HTTPError(MERCHANT_URL, 502, "Bad Gateway", {}, None)

        self.assertEqual(call_merchant(MERCHANT_URL, {}), 502)

    @mock.patch("incoming.services.merchant.urlopen")
    def test_transport_error_is_logged_not_raised(self, urlopen):
        urlopen.side_effect = URLError("connection refused")

        with self.assertLogs("incoming.services.merchant", level="ERROR"):
            self.assertIsNone(call_merchant(MERCHANT_URL, {}))

        self.assertEqual(urlopen.call_count, 1)
