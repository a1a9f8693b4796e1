"""
Keyproof — Web Edition
=======================

Streamlit page that generates an RSA key pair, re-reads both files and runs
the encrypt/decrypt self-test before offering them for download.  Key files
are written to a temporary directory that is removed after the run; the
session keeps only the file contents.

Launch:
    cd keyproof
    streamlit run WEB/app.py
"""

from __future__ import annotations

import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

# -- Ensure project root is importable ------------------------------------
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

import keygen  # noqa: E402
import keyproof  # noqa: E402

# ---------------------------------------------------------------------------
# Page config — must be the first Streamlit command
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Keyproof",
    page_icon="🔑",
    layout="centered",
)

_STATE = "keyproof_run"


@dataclass
class WebRun:
    """One generator run kept in ``st.session_state``."""

    steps: List[Tuple[str, str]] = field(default_factory=list)
    public_name: str = ""
    public_text: str = ""
    private_name: str = ""
    private_text: str = ""
    key_size: int = 0
    error: str = ""


def _default_comment() -> str:
    try:
        return keygen.key_comment()
    except (OSError, KeyError):
        return ""


def _run(bits: int, comment: str) -> WebRun:
    run = WebRun()

    def _record(step: str, status: str) -> None:
        if status == keyproof.STEP_START:
            run.steps.append((step, status))
        else:
            run.steps[-1] = (step, status)

    with tempfile.TemporaryDirectory(prefix="keyproof-") as tmp:
        try:
            result = keygen.create_and_test_key_pair(
                tmp, bits, comment, progress_callback=_record
            )
        except Exception as exc:
            run.error = str(exc)
            return run
        run.public_name = result.public_path.name
        run.public_text = result.public_path.read_text("utf-8")
        run.private_name = result.private_path.name
        run.private_text = result.private_path.read_text("utf-8")
        run.key_size = result.key_size
    return run


def _render_steps(run: WebRun) -> None:
    icons = {keyproof.STEP_OK: "✅", keyproof.STEP_FAILED: "❌"}
    lines = [f"{icons.get(status, '⏳')} {step}" for step, status in run.steps]
    st.markdown("  \n".join(lines))


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

st.title("🔑 Keyproof")
st.caption(
    "RSA key pair generator — every pair is read back from disk and proven "
    "with an encrypt/decrypt round trip."
)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

size = st.selectbox(
    "Key Size",
    list(keygen.KEY_SIZES),
    index=keygen.KEY_SIZES.index(keygen.DEFAULT_KEY_SIZE),
    format_func=lambda bits: f"{bits} bit",
)
comment = st.text_input("Comment", value=_default_comment(), placeholder="user@host")

if st.button("Generate & Test Key Pair", type="primary", use_container_width=True):
    with st.spinner(f"Generating and testing a {size}-bit key pair…"):
        st.session_state[_STATE] = _run(size, comment.strip())

# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

run = st.session_state.get(_STATE)
if run is not None:
    st.markdown("---")
    _render_steps(run)

    if run.error:
        st.error(f"Key pair generation failed ({run.error})")
    else:
        st.success(f"{run.key_size}-bit key pair created successfully.")
        st.text_area("Public Key", run.public_text.strip(), height=120)
        pub_col, priv_col = st.columns(2)
        with pub_col:
            st.download_button(
                "Download Public Key",
                run.public_text,
                file_name=run.public_name,
                mime="text/plain",
                use_container_width=True,
            )
        with priv_col:
            st.download_button(
                "Download Private Key",
                run.private_text,
                file_name=run.private_name,
                mime="application/x-pem-file",
                use_container_width=True,
            )
        st.caption("The private key is shown only as a download; keep it safe.")
