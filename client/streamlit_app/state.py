"""Session state helpers for Streamlit."""
from __future__ import annotations

import time

import streamlit as st


def init_session_state() -> None:
    defaults = {
        "todos": [],
        "users": [],
        "users_error": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def add_todo(text: str) -> None:
    text = text.strip()
    if not text:
        return
    todo = {"id": time.time_ns(), "text": text, "completed": False}
    st.session_state.todos = [*st.session_state.todos, todo]


def toggle_todo(todo_id: int) -> None:
    st.session_state.todos = [
        {**todo, "completed": not todo["completed"]} if todo["id"] == todo_id else todo
        for todo in st.session_state.todos
    ]


def delete_todo(todo_id: int) -> None:
    st.session_state.todos = [todo for todo in st.session_state.todos if todo["id"] != todo_id]


def set_users(users: list, error: str | None = None) -> None:
    st.session_state.users = users
    st.session_state.users_error = error
