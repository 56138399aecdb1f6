"""HTML rendering of translation results."""

from __future__ import annotations

import html
import json
from typing import Any

CSS = """<style type="text/css">
.engine {
  font-family: "MiSansVF";
  font-size: 18px;
  color: #578bc5;
}
.originalText {
    font-size: 120%;
    font-family: "MiSansVF";
    font-weight: 600;
    display: inline-block;
    margin: 0rem 0rem 0rem 0rem;
    color: #2a5598;
    margin-bottom: 0.6rem;
}
.frame {
    margin: 1rem 0.5rem 0.5rem 0;
    padding: 0.7rem 0.5rem 0.5rem 0;
    border-top: 3px dashed #eaeef6;
}
definition {
    font-family: "MiSansVF";
    color: #2a5598;
    height: 120px;
    padding: 0.05em;
    font-weight: 500;
    font-size: 16px;
}
</style>"""


def _response_body(response: Any) -> dict[str, Any]:
    if not isinstance(response, dict):
        return {}
    body = response.get("Response")
    return body if isinstance(body, dict) else {}


def extract_target_text(response: Any) -> str | None:
    text = _response_body(response).get("TargetText")
    return text if isinstance(text, str) else None


def extract_error(response: Any) -> tuple[str, str] | None:
    """Return ``(Code, Message)`` from ``Response.Error`` if the API reported one."""
    error = _response_body(response).get("Error")
    if not isinstance(error, dict):
        return None
    return str(error.get("Code", "")), str(error.get("Message", ""))


def render_translation(original: str, translated: str) -> str:
    # both texts are escaped, so "&" in a translation is emitted as "&amp;"
    lines = [
        CSS,
        f'<div class="originalText">{html.escape(original, quote=False)}</div>',
        "<br><br>",
        '<div class="frame">',
        f"<definition>{html.escape(translated, quote=False)}</definition>",
        "</div>",
        "<br>",
    ]
    return "\n".join(lines)


def render_error(response: Any) -> str:
    raw = json.dumps(response, ensure_ascii=False)
    return f"Api response error! Response: {raw}"


def present(original: str, response: Any) -> tuple[str, bool]:
    """Render *response*; the flag is False when no translated text was found."""
    translated = extract_target_text(response)
    if translated is None:
        return render_error(response), False
    return render_translation(original, translated), True
