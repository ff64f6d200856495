import logging

import streamlit as st

from frontend import controller as deck
from frontend.config import ALL_CATEGORIES, APP_TITLE
from frontend.ui.flashcard import render_flashcard, render_preview

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

st.set_page_config(
    page_title=APP_TITLE,
    layout="centered",
)


# ======================
# Controller & state
# ======================
def get_controller() -> deck.DeckController:
    if "deck" not in st.session_state:
        ctrl = deck.DeckController()
        with st.spinner("Loading..."):
            ctrl.load()
        st.session_state["deck"] = ctrl
    return st.session_state["deck"]


ctrl = get_controller()
ss = st.session_state

ss.setdefault("new_question", "")
ss.setdefault("new_answer", "")
ss.setdefault("new_category", "")
ss.setdefault("bulk_input", "")


# ======================
# Callbacks
# ======================
def on_toggle_add():
    ctrl.dispatch(deck.toggle_add_form)


def on_toggle_bulk():
    ctrl.dispatch(deck.toggle_bulk_form)


def on_add_card():
    ctrl.dispatch(
        deck.update_new_card,
        question=ss["new_question"],
        answer=ss["new_answer"],
        category=ss["new_category"],
    )
    ctrl.add_card()
    ss["new_question"] = ctrl.state.new_card.question
    ss["new_answer"] = ctrl.state.new_card.answer
    ss["new_category"] = ctrl.state.new_card.category


def on_bulk_import():
    ctrl.dispatch(deck.set_bulk_json, ss["bulk_input"])
    ctrl.bulk_import()
    ss["bulk_input"] = ctrl.state.bulk_json


def on_start_edit():
    ctrl.dispatch(deck.start_edit)
    ss["edit_question"] = ctrl.state.edit_card.question
    ss["edit_answer"] = ctrl.state.edit_card.answer
    ss["edit_category"] = ctrl.state.edit_card.category


def on_save_edit():
    ctrl.dispatch(
        deck.update_edit_card,
        question=ss["edit_question"],
        answer=ss["edit_answer"],
        category=ss["edit_category"],
    )
    ctrl.save_edit()


# ======================
# Header
# ======================
st.title(APP_TITLE)

state = ctrl.state
cols = st.columns(4)
cols[0].button(
    "✕ Close" if state.show_add_form else "+ Add Card",
    on_click=on_toggle_add,
    use_container_width=True,
)
cols[1].button(
    "✕ Close" if state.show_bulk_form else "📦 Bulk Import",
    on_click=on_toggle_bulk,
    use_container_width=True,
)
if state.collection:
    cols[2].button(
        "🔀 Shuffle",
        on_click=ctrl.dispatch,
        args=(deck.shuffle,),
        use_container_width=True,
    )
    cols[3].button(
        "🗑️ Delete All",
        on_click=ctrl.dispatch,
        args=(deck.request_delete_all,),
        use_container_width=True,
    )

if state.confirm_delete_all:
    st.warning("Are you sure you want to delete ALL flashcards? This cannot be undone!")
    yes, no = st.columns(2)
    yes.button("Yes, delete everything", on_click=ctrl.delete_all, args=(True,), type="primary")
    no.button("Cancel", on_click=ctrl.delete_all, args=(False,))

if state.notice:
    st.success(state.notice)
    ctrl.dispatch(deck.clear_notice)


# ======================
# Add form
# ======================
if state.show_add_form:
    with st.container(border=True):
        st.text_area(
            "Question (Markdown & LaTeX supported)",
            key="new_question",
            placeholder=r"E.g., **What is the quadratic formula?** $x = \frac{-b \pm \sqrt{b^2-4ac}}{2a}$",
        )
        render_preview(ss["new_question"])
        st.text_area(
            "Answer (Markdown & LaTeX supported)",
            key="new_answer",
            placeholder=r"E.g., $$x = \frac{-b \pm \sqrt{b^2-4ac}}{2a}$$",
        )
        render_preview(ss["new_answer"])
        st.text_input(
            "Category (optional)",
            key="new_category",
            placeholder="E.g., Math, Science, History",
        )
        st.button(
            "Add Flashcard",
            type="primary",
            on_click=on_add_card,
            disabled=not (ss["new_question"].strip() and ss["new_answer"].strip()),
        )


# ======================
# Bulk import form
# ======================
if state.show_bulk_form:
    with st.container(border=True):
        st.text_area(
            "JSON Array (paste your flashcards array here)",
            key="bulk_input",
            height=320,
            placeholder=(
                '[\n  {"question": "What is $E = mc^2$?", "answer": "Einstein\'s mass-energy equivalence", '
                '"category": "Physics"},\n  {"question": "Solve $$x^2 = 4$$", "answer": "$$x = \\\\pm 2$$", '
                '"category": "Math"}\n]'
            ),
        )
        if state.bulk_error:
            st.error(f"**Error:** {state.bulk_error}")
        st.caption(
            'Format: array of objects with "question" and "answer" fields '
            '(and an optional "category"). Markdown & LaTeX supported.'
        )
        st.button(
            "Import All Flashcards",
            type="primary",
            on_click=on_bulk_import,
            disabled=not ss["bulk_input"].strip(),
        )


# ======================
# Study view
# ======================
if not state.collection:
    st.info("No flashcards yet. Use **+ Add Card** or **📦 Bulk Import** to get started.")
    st.stop()

options = [ALL_CATEGORIES] + deck.categories(state)
selected = st.selectbox(
    "Filter by category",
    options=options,
    index=options.index(state.category_filter) if state.category_filter in options else 0,
    format_func=lambda c: "All Categories" if c == ALL_CATEGORIES else c,
)
if selected != state.category_filter:
    state = ctrl.dispatch(deck.select_category, selected)

card = deck.current_card(state)
if card is None:
    st.info("No cards at this position. Pick another category or reload.")
    st.stop()

render_flashcard(
    card,
    answer_visible=state.answer_visible,
    position=state.position,
    total=len(deck.filtered_view(state)),
    on_flip=lambda: ctrl.dispatch(deck.flip),
)

prev_col, flip_col, next_col = st.columns(3)
prev_col.button(
    "← Previous",
    on_click=ctrl.dispatch,
    args=(deck.previous_card,),
    use_container_width=True,
)
flip_col.button(
    "Show Question" if state.answer_visible else "Show Answer",
    on_click=ctrl.dispatch,
    args=(deck.flip,),
    use_container_width=True,
)
next_col.button(
    "Next →",
    on_click=ctrl.dispatch,
    args=(deck.next_card,),
    use_container_width=True,
)

edit_col, delete_col = st.columns(2)
edit_col.button("✏️ Edit Card", on_click=on_start_edit, use_container_width=True)
delete_col.button("🗑️ Delete Card", on_click=ctrl.delete_current, use_container_width=True)


# ======================
# Edit form
# ======================
if state.editing_id is not None:
    with st.container(border=True):
        st.subheader("Edit flashcard")
        st.text_area("Question", key="edit_question")
        render_preview(ss.get("edit_question", ""))
        st.text_area("Answer", key="edit_answer")
        render_preview(ss.get("edit_answer", ""))
        st.text_input("Category (optional)", key="edit_category")
        save, cancel = st.columns(2)
        save.button("Save changes", type="primary", on_click=on_save_edit)
        cancel.button("Cancel", on_click=ctrl.dispatch, args=(deck.cancel_edit,))
