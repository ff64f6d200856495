import streamlit as st

CARD_STYLE = """
<style>
.card-label {
    font-size: 0.75rem;
    letter-spacing: 0.08em;
    text-transform: uppercase;
    color: #777;
    margin-bottom: 0.5rem;
}
.card-counter {
    font-size: 0.85rem;
    color: #555;
    text-align: center;
}
</style>
"""


def render_card_content(text: str) -> None:
    """Markdown with GFM tables/strikethrough and $...$ / $$...$$ math; raw HTML is escaped."""
    st.markdown(text)


def render_preview(text: str) -> None:
    if not text:
        return
    with st.container(border=True):
        st.caption("Preview")
        render_card_content(text)


def render_flashcard(card: dict, answer_visible: bool, position: int, total: int, on_flip) -> None:
    st.markdown(CARD_STYLE, unsafe_allow_html=True)
    st.markdown(
        f"<div class='card-counter'>Card {position + 1} of {total}</div>",
        unsafe_allow_html=True,
    )

    with st.container(border=True):
        if not answer_visible:
            st.markdown("<div class='card-label'>Question</div>", unsafe_allow_html=True)
            render_card_content(card["question"])
        else:
            st.markdown("<div class='card-label'>Answer</div>", unsafe_allow_html=True)
            render_card_content(card["answer"])
            if card.get("category"):
                st.caption(f"🏷️ {card['category']}")

        st.button(
            "Click to flip",
            key="card_body_flip",
            on_click=on_flip,
            type="tertiary",
            use_container_width=True,
        )
