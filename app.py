"""
MargDarshak: Road Safety Intervention GPT
Main Streamlit Application

"Road safety interventions for Indian highways, backed by best-practice data."
"""

import logging
import random

import streamlit as st
from dotenv import load_dotenv

from agent.orchestrator import create_session, process_message
from agent.prompts import LOADING_MESSAGES
from config.settings import resolve_keys, save_local_key, settings_path

load_dotenv()
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# --- Page Config ---
st.set_page_config(
    page_title="MargDarshak AI Safety Assistant",
    page_icon="🛣️",
    layout="wide",
    initial_sidebar_state="expanded",
)

# --- Session State Initialization ---
if "chat" not in st.session_state:
    st.session_state.chat = create_session()


# ============================================================
# Sidebar
# ============================================================

with st.sidebar:
    st.title("MargDarshak AI")
    st.caption("Road Safety Intervention GPT")
    st.markdown("---")

    keys = resolve_keys(load_env=False)
    st.markdown("### Providers")
    st.write(("✅" if keys.openrouter else "⚪") + " OpenRouter")
    st.write(("✅" if keys.groq else "⚪") + " Groq")

    with st.expander("Store API keys locally"):
        st.caption(f"Saved to {settings_path()}")
        openrouter_key = st.text_input("OpenRouter API key", type="password")
        groq_key = st.text_input("Groq API key", type="password")
        if st.button("Save keys"):
            if openrouter_key:
                save_local_key("openrouter", openrouter_key)
            if groq_key:
                save_local_key("groq", groq_key)
            st.success("Keys saved.")
            st.rerun()

    st.markdown("### Context Data")
    context_data = st.text_area(
        "Optional data sent with every question",
        value=st.session_state.chat.get("context_data") or "",
        height=120,
    )
    st.session_state.chat["context_data"] = context_data.strip() or None

    if st.button("Clear conversation"):
        st.session_state.chat = create_session()
        st.rerun()

    st.markdown("---")
    st.markdown("Built for National Road Safety Hackathon 2025 | Team MargDarshak AI")


# ============================================================
# Main Chat Interface
# ============================================================

st.title("🛣️ MargDarshak AI Safety Assistant")
st.markdown("*Ask about road safety measures, accident hotspots, or highway interventions across India.*")
st.markdown("---")

for message in st.session_state.chat["messages"]:
    with st.chat_message(message.role):
        st.markdown(message.content)

if prompt := st.chat_input("Ask about a road safety issue..."):
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner(random.choice(LOADING_MESSAGES)):
            answer = process_message(st.session_state.chat, prompt)
        st.markdown(answer)
