from tmt_translate.presenter import (
    CSS,
    extract_error,
    extract_target_text,
    present,
    render_error,
    render_translation,
)


def test_render_translation_layout():
    output = render_translation("hello", "你好")
    assert output.startswith(CSS)
    assert output.splitlines()[-6:] == [
        '<div class="originalText">hello</div>',
        "<br><br>",
        '<div class="frame">',
        "<definition>你好</definition>",
        "</div>",
        "<br>",
    ]


def test_render_translation_escapes_markup():
    output = render_translation("a < b", "<script>")
    assert '<div class="originalText">a &lt; b</div>' in output
    assert "<definition>&lt;script&gt;</definition>" in output


def test_present_success():
    output, ok = present("你好", {"Response": {"TargetText": "hello"}})
    assert ok is True
    assert "<definition>hello</definition>" in output


def test_present_missing_field_returns_diagnostic():
    response = {"Response": {"Error": {"Code": "AuthFailure", "Message": "签名错误"}}}
    output, ok = present("hello", response)
    assert ok is False
    assert output == 'Api response error! Response: {"Response": {"Error": {"Code": "AuthFailure", "Message": "签名错误"}}}'


def test_extract_helpers_tolerate_odd_shapes():
    assert extract_target_text({}) is None
    assert extract_target_text({"Response": None}) is None
    assert extract_target_text({"Response": {"TargetText": 3}}) is None
    assert extract_target_text([]) is None
    assert extract_error({"Response": {"TargetText": "x"}}) is None
    assert extract_error({"Response": {"Error": {"Code": "LimitExceeded"}}}) == ("LimitExceeded", "")


def test_render_error_embeds_raw_json():
    assert render_error({"a": 1}) == 'Api response error! Response: {"a": 1}'


def test_render_translation_escapes_ampersand():
    output = render_translation("R&D", "研发 & 设计")
    assert '<div class="originalText">R&amp;D</div>' in output
    assert "<definition>研发 &amp; 设计</definition>" in output
