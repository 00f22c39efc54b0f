from __future__ import annotations

import streamlit as st

import tryme
from tryme.ui import toast_catch_action

ARR = ["element 0", "element 1"]
INDEXES = [0, 1, 2]

toast = toast_catch_action()


def notify(exc: Exception) -> None:
    # Replace with actual audit logging/metrics in production
    st.session_state["caught"] = st.session_state.get("caught", 0) + 1
    toast(exc)


# Optional, set once per run, the catch action is a no-op by default
tryme.set_catch_action(notify)


def main() -> None:
    st.title("TryMe demo")
    st.caption("3 interactive examples. Change array indexes to trigger the catch action.")
    st.code('arr = ["element 0", "element 1"]', language="python")

    st.subheader("Example 1")
    st.code("def show():\n    foo = arr[index]\n    st.success(f'Success! {foo}')\n\nattempt(show)", language="python")
    index1 = st.selectbox("Example 1 index", INDEXES, key="example1")

    def show() -> None:
        foo = ARR[index1]
        st.success(f"Success! {foo}")

    tryme.attempt(show)

    st.subheader("Example 2")
    st.code("arr_value_or_none = attempt(lambda: arr[index])", language="python")
    index2 = st.selectbox("Example 2 index", INDEXES, key="example2")
    arr_value_or_none = tryme.attempt(lambda: ARR[index2])
    st.markdown(f"arr_value_or_none: `{arr_value_or_none}`")

    st.subheader("Example 3")
    st.code('arr_value_or_default = attempt_or("fail", lambda: arr[index])', language="python")
    index3 = st.selectbox("Example 3 index", INDEXES, key="example3")
    arr_value_or_default = tryme.attempt_or("fail", lambda: ARR[index3])
    st.markdown(f"arr_value_or_default: `{arr_value_or_default}`")

    st.markdown(f"Caught so far: `{st.session_state.get('caught', 0)}`")


if __name__ == "__main__":
    main()
