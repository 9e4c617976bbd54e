"""Streamlit client: a local todo list next to the backend's user list."""
from __future__ import annotations

import streamlit as st

from api_client import get_client
from state import add_todo, delete_todo, init_session_state, set_users, toggle_todo


def _optional_int(value):
    return None if value is None else int(value)


def fetch_users(client) -> None:
    try:
        set_users(client.list_users())
    except Exception as e:
        set_users([], error=str(e) or "Failed to fetch users")


def render_todos():
    st.header("Todo List")
    with st.form("todo_form", clear_on_submit=True):
        text = st.text_input("Add a new todo...", key="todo_text")
        if st.form_submit_button("Add"):
            add_todo(text)

    for todo in st.session_state.todos:
        col1, col2 = st.columns([6, 1])
        with col1:
            st.checkbox(
                todo["text"],
                value=todo["completed"],
                key=f"todo_done_{todo['id']}",
                on_change=toggle_todo,
                args=(todo["id"],),
            )
        with col2:
            st.button("Delete", key=f"todo_del_{todo['id']}", on_click=delete_todo, args=(todo["id"],))

    if not st.session_state.todos:
        st.write("No todos yet. Add one above!")


def render_users(client):
    st.header("Users")
    if st.button("Refresh"):
        fetch_users(client)

    with st.expander("Create user"):
        with st.form("user_form", clear_on_submit=True):
            username = st.text_input("Username")
            name = st.text_input("Name")
            gender = st.text_input("Gender")
            age = st.number_input("Age", min_value=0, step=1, value=None)
            status = st.number_input("Status", step=1, value=None)
            if st.form_submit_button("Create"):
                try:
                    created = client.create_user(
                        username=username or None,
                        name=name or None,
                        gender=gender or None,
                        age=_optional_int(age),
                        status=_optional_int(status),
                    )
                    st.success(f"Created user #{created['id']}")
                    fetch_users(client)
                except Exception as e:
                    st.error(f"Create failed: {e}")

    if st.session_state.users_error:
        st.error(f"Error: {st.session_state.users_error}")
    elif not st.session_state.users:
        st.write("No users found.")
    else:
        for user in st.session_state.users:
            st.subheader(user.get("name") or user.get("username") or f"#{user['id']}")
            st.caption(f"updated {user.get('updateTime')}")


def main():
    st.set_page_config(page_title="Unisandbox Demo", layout="wide")
    first_run = "users" not in st.session_state
    init_session_state()
    client = get_client()
    if first_run:
        fetch_users(client)

    col1, col2 = st.columns(2)
    with col1:
        render_todos()
    with col2:
        render_users(client)


if __name__ == "__main__":
    main()
