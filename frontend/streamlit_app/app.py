import streamlit as st

from todo_api.client import TodoApiError, TodoClient
from todo_api.core.config import settings
from todo_api.db.models import Priority

client = TodoClient(settings.API_URL)

st.set_page_config(page_title="Todo UI", layout="centered")
st.title("Todos")

with st.form("create", clear_on_submit=True):
    title = st.text_input("What needs to be done?")
    priority = st.selectbox("Priority", [p.value for p in Priority], index=1)
    if st.form_submit_button("Add") and title.strip():
        try:
            client.create_todo(title.strip(), priority)
        except TodoApiError as e:
            st.error(str(e))

view = st.radio("Show", ["All", "Active", "Completed"], horizontal=True)

try:
    if view == "All":
        todos = client.fetch_todos()
    else:
        todos = client.get_todos_by_completion_status(view == "Completed")
except TodoApiError as e:
    st.error(str(e))
    todos = []

if not todos:
    st.info("No todos.")

for todo in todos:
    done, label, remove = st.columns([1, 8, 1])
    if done.button("✓" if todo["completed"] else "○", key=f"toggle-{todo['id']}"):
        try:
            client.toggle_todo_complete(todo["id"])
        except TodoApiError as e:
            st.error(str(e))
        st.rerun()
    text = f"~~{todo['title']}~~" if todo["completed"] else todo["title"]
    label.markdown(f"**[{todo['priority']}]** {text}  \n_{todo['createdDate']}_")
    if remove.button("✕", key=f"delete-{todo['id']}"):
        try:
            client.delete_todo(todo["id"])
        except TodoApiError as e:
            st.error(str(e))
        st.rerun()
