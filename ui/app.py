# -----------------------------------------------------------------------------
# Streamlit Frontend for the Polynomial Root Solver
# Purpose:
#   Minimal UI to (1) enter a polynomial, (2) call the /solve endpoint, and
#   (3) render the canonical polynomial, roots, steps and verification.
#---------------------------------------------------------------------------

import os, json, requests, streamlit as st
from dotenv import load_dotenv

from polyroots.formatter import format_root
from polyroots.types import RealRoot, ComplexRoot

# Load .env to pick API_URL at runtime for local/remote backends
load_dotenv()
API_URL = os.getenv("API_URL","http://127.0.0.1:8000")

def _root_from_wire(r):
    # API sends plain numbers for real roots and {re, im} for complex ones
    if isinstance(r, dict):
        return ComplexRoot(r["re"], r["im"])
    return RealRoot(r)

# Page setup and header
st.set_page_config(page_title="Polynomial Root Solver", layout="centered")
st.title("Polynomial Root Solver")

# ---------------- Sidebar: syntax help ----------------------------------------
with st.sidebar:
    st.subheader("Syntax")
    st.markdown(
        "- one variable, `x`\n"
        "- powers with `^`: `3x^4`\n"
        "- terms joined by `+` / `-`, no parentheses or `*`\n"
        "- degree ≤ 3 is solved exactly; higher degrees use Newton–Raphson "
        "and only report real roots"
    )

# ---------------- Main Form ---------------------------------------------------
with st.form("polyform"):
    expression = st.text_input("Enter polynomial expression:", placeholder="e.g., x^2 - 3x + 2")
    submit = st.form_submit_button("Solve")

if submit:
    if not expression.strip():
        st.warning("Please enter a polynomial expression")
        st.stop()

    with st.spinner("Solving..."):
        r = requests.post(f"{API_URL}/solve", json={"expression": expression.strip()})
    if r.status_code != 200:
        st.error(f"Solve error: {r.text}")
        st.stop()

    res = r.json()
    if not res.get("ok", False):
        # Failure path: show the solver's message and how far it got
        st.error(res.get("error") or "Invalid polynomial expression. Please enter a valid polynomial (e.g., x^2 - 3x + 2)")
        with st.expander("Trace"):
            st.code(json.dumps(res.get("trace", []), indent=2))
        st.stop()

    # Success path: polynomial, roots, steps, verification
    st.subheader("Results")
    st.markdown(f"**Polynomial:** `{res.get('formatted') or expression}`")
    st.markdown("**Roots:**")
    for root in res["roots"]:
        st.write("• " + format_root(_root_from_wire(root)))

    ver = res.get("verification") or {}
    if ver and not ver.get("complete", True):
        st.info(f"Found {ver['found_roots']} of {ver['expected_roots']} roots; "
                "the numerical search does not report complex roots above degree 3.")

    st.subheader("Steps")
    st.write("\n".join("• " + s for s in res.get("steps", [])))
    with st.expander("Trace"):
        st.code(json.dumps(res.get("trace", []), indent=2))
    if res.get("trace_path"):
        st.caption(f"Trace saved to {res['trace_path']}")
