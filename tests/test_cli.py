from geminivision.api.cli import apply_command, default_request, preview_url


def test_set_and_unset_fields():
    request = default_request()

    request, message = apply_command(request, "/set style_preset digital art")
    assert request.style_preset == "digital art"
    assert "style_preset" in message

    request, _ = apply_command(request, "/set sanitize off")
    assert request.sanitize is False

    request, _ = apply_command(request, "/unset style_preset")
    assert request.style_preset is None

    request, _ = apply_command(request, "/unset sanitize")
    assert request.sanitize is True


def test_unknown_field_and_missing_value_leave_request_unchanged():
    request = default_request()

    same, message = apply_command(request, "/set colour red")
    assert same == request
    assert message.startswith("Usage:")

    same, message = apply_command(request, "/set seed")
    assert same == request
    assert message == "Missing value for seed."


def test_reset_show_and_options():
    request, _ = apply_command(default_request(), "/set lighting cinematic")

    request, message = apply_command(request, "/show")
    assert "lighting: 'cinematic'" in message

    request, message = apply_command(request, "/options")
    assert "camera_view: none, eye_level" in message

    request, message = apply_command(request, "/reset")
    assert request == default_request()


def test_preview_url_truncates_long_data_uris():
    short = "https://cdn.test/a.png"
    assert preview_url(short) == short

    long_url = "data:image/png;base64," + "A" * 500
    preview = preview_url(long_url)
    assert preview.startswith("data:image/png;base64,")
    assert preview.endswith(f"({len(long_url)} chars)")
