"""
Tests for request construction: URLs, query strings, JSON and multipart
bodies, headers and authorization.
"""

import email
import json

import pytest

from openai_client_lib.api_types import Operation, ProxyEndpoints
from openai_client_lib.data_models import ChatConversation, ChatMessage, ThreadRequest
from openai_client_lib.exceptions import RequestConstructionError
from openai_client_lib.utils.auth import BearerAuth, no_auth
from openai_client_lib.utils.multipart import MultipartForm
from openai_client_lib.utils.request_builder import RequestBuilder

from conftest import API_KEY, BASE_URL


def build_with_auth(auth):
    builder = RequestBuilder(
        ProxyEndpoints(lambda op: "/m", lambda op: "GET"), BASE_URL, auth
    )
    return builder.build(Operation.MODELS_LIST)


def parse_multipart(body, content_type):
    raw = b"Content-Type: " + content_type.encode("ascii") + b"\r\n\r\n" + body
    return email.message_from_bytes(raw)


class TestUrl:
    def test_joins_with_single_slash(self, builder):
        builder.base_url = BASE_URL + "/"
        assert builder.build(Operation.MODELS_LIST).url == BASE_URL + "/v1/models"

    def test_base_path_prefix_is_kept(self):
        builder = RequestBuilder(
            ProxyEndpoints(lambda op: "v1/models", lambda op: "GET"),
            "https://proxy.local/openai",
        )
        assert builder.build(Operation.MODELS_LIST).url == (
            "https://proxy.local/openai/v1/models"
        )

    @pytest.mark.parametrize(
        "base_url",
        [
            "",
            "not a url",
            "ftp://api.test",
            "https://",
            "api.test/v1",
            "http://[::1",
            "https://api.test:abc",
            "https://:8080",
        ],
    )
    def test_invalid_base_url(self, builder, base_url):
        builder.base_url = base_url
        with pytest.raises(RequestConstructionError):
            builder.build(Operation.MODELS_LIST)

    def test_per_call_base_url(self, builder):
        request = builder.build(Operation.MODELS_LIST, base_url="http://localhost:8080")
        assert request.url == "http://localhost:8080/v1/models"

    def test_path_params_are_quoted(self, builder):
        request = builder.build(
            Operation.FILES_RETRIEVE, path_params={"file_id": "a/b c"}
        )
        assert request.url == BASE_URL + "/v1/files/a%2Fb%20c"

    def test_multiple_path_params(self, builder):
        request = builder.build(
            Operation.RUN_STEP_RETRIEVE,
            path_params={"thread_id": "th_1", "run_id": "run_2", "step_id": "st_3"},
        )
        assert request.url == BASE_URL + "/v1/threads/th_1/runs/run_2/steps/st_3"

    @pytest.mark.parametrize("params", [None, {}, {"file_id": None}, {"file_id": ""}])
    def test_missing_path_param(self, builder, params):
        with pytest.raises(RequestConstructionError) as exc_info:
            builder.build(Operation.FILES_RETRIEVE, path_params=params)
        assert "file_id" in str(exc_info.value)


class TestQuery:
    def test_none_values_are_dropped(self, builder):
        request = builder.build(Operation.FILES_LIST, query={"purpose": None})
        assert request.url == BASE_URL + "/v1/files"

    def test_values_are_encoded(self, builder):
        request = builder.build(
            Operation.ASSISTANT_LIST,
            query={"limit": 5, "order": "desc", "after": None, "before": "asst 1"},
        )
        assert request.url == BASE_URL + "/v1/assistants?limit=5&order=desc&before=asst+1"

    def test_bools_are_lowercase(self, builder):
        request = builder.build(Operation.MODELS_LIST, query={"flag": True, "x": False})
        assert request.url.endswith("?flag=true&x=false")


class TestJsonBody:
    def test_pydantic_body_is_serialised_without_nulls(self, builder):
        conversation = ChatConversation(
            model="gpt-3.5-turbo",
            messages=[ChatMessage.user("Hi")],
            max_tokens=10,
        )
        request = builder.build(Operation.CHAT_CREATE, body=conversation)

        assert request.method == "POST"
        assert request.url == BASE_URL + "/v1/chat/completions"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.body) == {
            "model": "gpt-3.5-turbo",
            "messages": [{"role": "user", "content": "Hi"}],
            "max_tokens": 10,
        }

    def test_dict_body(self, builder):
        request = builder.build(
            Operation.EMBEDDINGS_CREATE, body={"model": "m", "input": "zażółć"}
        )
        assert json.loads(request.body.decode("utf-8"))["input"] == "zażółć"

    def test_no_body(self, builder):
        request = builder.build(Operation.MODELS_LIST)
        assert request.body is None
        assert "Content-Type" not in request.headers

    def test_unserialisable_body(self, builder):
        with pytest.raises(RequestConstructionError):
            builder.build(Operation.CHAT_CREATE, body={"x": object()})


class TestMultipartBody:
    def test_form_round_trips_through_mime_parser(self, builder):
        image = b"\x89PNG\x00\x01\x02binary"
        form = (
            MultipartForm()
            .add_file("image", image, filename="image.png", content_type="image/png")
            .add_field("prompt", "a red fox")
            .add_field("n", 2)
            .add_field("user", None)
        )
        request = builder.build(Operation.IMAGES_EDIT, form=form)

        content_type = request.headers["Content-Type"]
        assert content_type.startswith("multipart/form-data; boundary=")
        message = parse_multipart(request.body, content_type)
        assert message.is_multipart()

        parts = message.get_payload()
        names = [p.get_param("name", header="content-disposition") for p in parts]
        assert names == ["image", "prompt", "n"]

        assert parts[0].get_filename() == "image.png"
        assert parts[0].get_content_type() == "image/png"
        assert parts[0].get_payload(decode=True) == image
        assert parts[1].get_payload(decode=True) == b"a red fox"
        assert parts[2].get_payload(decode=True) == b"2"

    def test_exact_framing(self):
        form = MultipartForm().add_field("purpose", "fine-tune")
        form.add_file("file", b"{}", filename="data.jsonl")
        body, content_type = form.encode(boundary="XYZ")

        assert content_type == "multipart/form-data; boundary=XYZ"
        assert body == (
            b"--XYZ\r\n"
            b'Content-Disposition: form-data; name="purpose"\r\n'
            b"\r\n"
            b"fine-tune\r\n"
            b"--XYZ\r\n"
            b'Content-Disposition: form-data; name="file"; filename="data.jsonl"\r\n'
            b"Content-Type: application/octet-stream\r\n"
            b"\r\n"
            b"{}\r\n"
            b"--XYZ--\r\n"
        )

    def test_boundary_never_occurs_in_data(self):
        form = MultipartForm().add_file("file", b"payload", filename="f.bin")
        body, content_type = form.encode()
        boundary = content_type.split("boundary=", 1)[1]
        assert boundary.encode() not in b"payload"
        assert body.count(b"--" + boundary.encode()) == 2

    def test_form_wins_over_json_body(self, builder):
        form = MultipartForm().add_field("purpose", "assistants")
        request = builder.build(Operation.FILES_UPLOAD, body={"x": 1}, form=form)
        assert request.headers["Content-Type"].startswith("multipart/form-data")

    def test_upload_operation_requires_form(self, builder):
        with pytest.raises(RequestConstructionError):
            builder.build(Operation.FILES_UPLOAD, body={"purpose": "fine-tune"})

    def test_form_rejected_for_json_operation(self, builder):
        form = MultipartForm().add_field("prompt", "a cat")
        with pytest.raises(RequestConstructionError):
            builder.build(Operation.IMAGES_GENERATE, form=form)

    def test_field_rules(self):
        form = MultipartForm().add_field("stream", True).add_file("mask", None, "m")
        assert len(form) == 1
        assert form.parts[0].data == b"true"
        with pytest.raises(ValueError):
            form.add_field("stream", False)


class TestHeadersAndAuth:
    def test_bearer_token(self, builder):
        request = builder.build(Operation.MODELS_LIST)
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"

    def test_organization_header(self):
        auth = BearerAuth("k", organization="org-1")
        builder = RequestBuilder(
            ProxyEndpoints(lambda op: "/m", lambda op: "GET"), BASE_URL, auth
        )
        assert builder.build(Operation.MODELS_LIST).headers["OpenAI-Organization"] == (
            "org-1"
        )

    def test_empty_token_adds_nothing(self):
        request = build_with_auth(BearerAuth(""))
        assert "Authorization" not in request.headers

    def test_no_auth(self):
        request = build_with_auth(no_auth)
        assert "Authorization" not in request.headers

    def test_repr_hides_token(self):
        assert API_KEY not in repr(BearerAuth(API_KEY))

    def test_custom_strategy_sees_final_request(self, builder):
        seen = {}

        def signer(request):
            seen["url"] = request.url
            request.headers["X-Signature"] = "sig:" + request.method

        builder.auth = signer
        request = builder.build(
            Operation.FILES_RETRIEVE, path_params={"file_id": "file-1"}
        )
        assert seen["url"] == BASE_URL + "/v1/files/file-1"
        assert request.headers["X-Signature"] == "sig:GET"

    def test_beta_header_for_assistants_family(self, builder):
        request = builder.build(Operation.THREAD_CREATE, body=ThreadRequest())
        assert request.headers["OpenAI-Beta"] == "assistants=v1"
        assert request.body == b"{}"

    def test_no_beta_header_elsewhere(self, builder):
        assert "OpenAI-Beta" not in builder.build(Operation.MODELS_LIST).headers

    def test_extra_headers(self, builder):
        request = builder.build(
            Operation.CHAT_CREATE, body={}, headers={"Accept": "text/event-stream"}
        )
        assert request.headers["Accept"] == "text/event-stream"


class TestProxyFailures:
    @pytest.mark.parametrize("path", ["", "   ", None])
    def test_empty_proxy_path(self, path):
        builder = RequestBuilder(
            ProxyEndpoints(lambda op: path, lambda op: "POST"), BASE_URL
        )
        with pytest.raises(RequestConstructionError):
            builder.build(Operation.CHAT_CREATE)

    def test_empty_proxy_method(self):
        builder = RequestBuilder(
            ProxyEndpoints(lambda op: "/chat", lambda op: ""), BASE_URL
        )
        with pytest.raises(RequestConstructionError):
            builder.build(Operation.CHAT_CREATE)

    def test_proxy_function_failure(self):
        def path_fn(operation):
            raise KeyError(operation)

        builder = RequestBuilder(ProxyEndpoints(path_fn, lambda op: "POST"), BASE_URL)
        with pytest.raises(RequestConstructionError):
            builder.build(Operation.CHAT_CREATE)

    def test_lowercase_method_is_normalised(self):
        builder = RequestBuilder(
            ProxyEndpoints(lambda op: "/chat", lambda op: "post"), BASE_URL
        )
        assert builder.build(Operation.CHAT_CREATE).method == "POST"
