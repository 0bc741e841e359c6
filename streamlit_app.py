from __future__ import annotations
import streamlit as st
import streamlit.components.v1 as components

from rssreader.converter import convert_to_string
from rssreader.core import FeedUnreachableError, StructuralError
from rssreader.parser.xml_tree import load_tree
from rssreader.validators import is_rss_v2

st.set_page_config(page_title="RSS to HTML", page_icon="📰")

st.title("RSS to HTML")
st.caption("Paste the URL of an RSS 2.0 feed. Returns a static HTML page listing its news items as a table.")

with st.form("converter"):
    url = st.text_input(
        "RSS 2.0 feed URL",
        placeholder="https://news.example.com/rss.xml",
    )
    filename = st.text_input("Output file name", value="feed.html")
    submitted = st.form_submit_button("Convert")

if submitted:
    try:
        root = load_tree(url)
    except FeedUnreachableError as e:
        st.error(f"Could not read feed: {e.reason}")
        st.stop()

    if not is_rss_v2(root):
        st.warning("Your file was not found to be a valid RSS 2.0 feed.")
        st.stop()

    try:
        html = convert_to_string(root)
    except StructuralError as e:
        st.error(f"Feed is missing required elements: {e}")
        st.stop()

    st.success("Feed converted")
    st.download_button("Download HTML", html, file_name=filename or "feed.html", mime="text/html")

    st.divider()
    st.subheader("Preview")
    components.html(html, height=600, scrolling=True)

    with st.expander("HTML source"):
        st.code(html, language="html")
