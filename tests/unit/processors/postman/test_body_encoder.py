import pytest

from src.exceptions import BodyRenderError
from src.models import RequestDefinition
from src.processors.postman.body_encoder import BodyEncoder
from src.processors.postman.mime_types import MimeResolver

BOUNDARY = "----TestBoundary"


@pytest.fixture
def encoder():
    return BodyEncoder(boundary=BOUNDARY, mime_resolver=MimeResolver())


def _request(body, host=("api", "example", "com")):
    return RequestDefinition.model_validate(
        {
            "method": "POST",
            "url": {"raw": "https://api.example.com/login", "host": list(host), "path": ["login"]},
            "body": body,
        }
    )


def test_encode_without_body_is_empty(encoder):
    result = encoder.encode("No Body", RequestDefinition.model_validate({"url": "https://x.io"}))

    assert result.headers == []
    assert result.body == ""


def test_encode_raw_body_verbatim_with_leading_newline(encoder):
    result = encoder.encode("Raw", _request({"mode": "raw", "raw": '{\n  "a": 1\n}'}))

    assert result.headers == []
    assert result.body == '\n{\n  "a": 1\n}'


def test_encode_empty_raw_body(encoder):
    result = encoder.encode("Raw", _request({"mode": "raw", "raw": ""}))

    assert result.body == ""


def test_encode_unknown_mode_falls_back_to_raw(encoder):
    result = encoder.encode("GraphQL", _request({"mode": "graphql", "raw": "query"}))

    assert result.body == "\nquery"


def test_encode_urlencoded_percent_encodes_keys_and_values(encoder):
    result = encoder.encode(
        "Form", _request({"mode": "urlencoded", "urlencoded": [{"key": "a b", "value": "c&d"}]})
    )

    assert result.body == "\na%20b=c%26d"
    assert result.headers == [
        "Host: api.example.com",
        "Content-Type: application/x-www-form-urlencoded",
        "Content-Length: 11",
    ]


def test_encode_urlencoded_joins_pairs_and_counts_bytes(encoder):
    result = encoder.encode(
        "Form",
        _request(
            {
                "mode": "urlencoded",
                "urlencoded": [
                    {"key": "user", "value": "jöhn"},
                    {"key": "scope", "value": "read(all)*"},
                ],
            }
        ),
    )

    assert result.body == "\nuser=j%C3%B6hn&scope=read(all)*"
    assert result.headers[2] == f"Content-Length: {len('user=j%C3%B6hn&scope=read(all)*')}"


def test_encode_urlencoded_missing_value_encodes_empty(encoder):
    result = encoder.encode("Form", _request({"mode": "urlencoded", "urlencoded": [{"key": "flag"}]}))

    assert result.body == "\nflag="


def test_encode_urlencoded_without_fields_raises(encoder):
    with pytest.raises(BodyRenderError) as exc:
        encoder.encode("Broken", _request({"mode": "urlencoded"}))

    assert exc.value.request_name == "Broken"


def test_encode_formdata_text_and_file_fields(encoder):
    result = encoder.encode(
        "Upload",
        _request(
            {
                "mode": "formdata",
                "formdata": [
                    {"key": "name", "type": "text", "value": "John"},
                    {"key": "f", "type": "file", "src": "/tmp/x.png"},
                ],
            }
        ),
    )

    assert result.headers == [
        "Host: api.example.com",
        f"Content-Type: multipart/form-data; boundary={BOUNDARY}",
    ]
    assert result.body == (
        f"\n--{BOUNDARY}\n"
        'Content-Disposition: form-data; name="name"\n'
        "\n"
        "John"
        f"\n--{BOUNDARY}\n"
        'Content-Disposition: form-data; name="f"; filename="x.png"\n'
        "Content-Type: image/png\n"
        "\n"
        "< /tmp/x.png"
        f"\n--{BOUNDARY}--"
    )


def test_encode_formdata_does_not_read_file_content(encoder, tmp_path):
    upload = tmp_path / "secret.txt"
    upload.write_text("TOP SECRET CONTENT")

    result = encoder.encode(
        "Upload", _request({"mode": "formdata", "formdata": [{"key": "f", "type": "file", "src": str(upload)}]})
    )

    assert "TOP SECRET CONTENT" not in result.body
    assert f"< {upload}" in result.body
    assert 'filename="secret.txt"' in result.body


def test_encode_formdata_windows_path_uses_basename(encoder):
    result = encoder.encode(
        "Upload",
        _request({"mode": "formdata", "formdata": [{"key": "f", "type": "file", "src": "C:\\docs\\a.pdf"}]}),
    )

    assert 'filename="a.pdf"' in result.body
    assert "Content-Type: application/pdf" in result.body


def test_encode_formdata_multiple_sources_emit_one_part_each(encoder):
    result = encoder.encode(
        "Upload",
        _request(
            {"mode": "formdata", "formdata": [{"key": "f", "type": "file", "src": ["/a/1.png", "/a/2.jpg"]}]}
        ),
    )

    assert result.body.count(f"--{BOUNDARY}\n") == 2
    assert 'filename="1.png"' in result.body
    assert 'filename="2.jpg"' in result.body


def test_encode_formdata_file_without_src_raises(encoder):
    with pytest.raises(BodyRenderError):
        encoder.encode("Upload", _request({"mode": "formdata", "formdata": [{"key": "f", "type": "file"}]}))


def test_encode_formdata_without_fields_raises(encoder):
    with pytest.raises(BodyRenderError):
        encoder.encode("Upload", _request({"mode": "formdata"}))


def test_encode_formdata_empty_field_list_only_closes_boundary(encoder):
    result = encoder.encode("Upload", _request({"mode": "formdata", "formdata": []}))

    assert result.body == f"\n--{BOUNDARY}--"


@pytest.mark.parametrize(
    "body",
    [
        {"mode": "raw", "raw": {"a": 1}},
        {"mode": "raw", "raw": ["line"]},
        {"mode": "urlencoded", "urlencoded": "a=b"},
        {"mode": "urlencoded", "urlencoded": {"key": "a"}},
        {"mode": "formdata", "formdata": "x"},
        {"mode": "formdata", "formdata": ["not an object"]},
    ],
)
def test_encode_wrongly_typed_payload_raises(encoder, body):
    with pytest.raises(BodyRenderError) as exc:
        encoder.encode("Typed", _request(body))

    assert exc.value.request_name == "Typed"


def test_encode_formdata_null_key_and_type_render_as_text(encoder):
    result = encoder.encode(
        "Upload", _request({"mode": "formdata", "formdata": [{"key": None, "type": None, "value": "v"}]})
    )

    assert result.body == f'\n--{BOUNDARY}\nContent-Disposition: form-data; name=""\n\nv\n--{BOUNDARY}--'


def test_encode_urlencoded_null_key_encodes_empty(encoder):
    result = encoder.encode("Login", _request({"mode": "urlencoded", "urlencoded": [{"key": None, "value": 1}]}))

    assert result.body == "\n=1"
