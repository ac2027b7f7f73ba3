"""
Streamlit UI for Cognitive Services Explorer.

Provides a user interface for:
- Previewing and running Text Analytics operations
- Managing Face API person groups and persons
- Detecting and identifying faces
- Managing service profiles (endpoints and keys)

Each page is backed by a view model kept in the Streamlit session state.

Run with: streamlit run cognitive_explorer/main.py
"""

import asyncio
import json

import streamlit as st

from cognitive_explorer import __version__
from cognitive_explorer.database import init_db
from cognitive_explorer.services.mediator import get_mediator
from cognitive_explorer.services.requests import face as face_requests
from cognitive_explorer.services.requests import text as text_requests
from cognitive_explorer.services.requests.base import HttpRequest
from cognitive_explorer.services.secret_manager import configure_logging
from cognitive_explorer.services.viewmodels import (
    FaceViewModel,
    PersonGroupViewModel,
    ProfileViewModel,
    TextViewModel,
)


# Page configuration
st.set_page_config(
    page_title="Cognitive Services Explorer",
    page_icon="🧠",
    layout="wide",
    initial_sidebar_state="expanded",
)

METHOD_COLORS = {
    "GET": "#28a745",
    "POST": "#007bff",
    "PUT": "#fd7e14",
    "PATCH": "#6f42c1",
    "DELETE": "#dc3545",
}


def run(coro):
    """Runs a view model coroutine to completion from a Streamlit callback."""
    return asyncio.run(coro)


def init_session_state():
    """Initialize Streamlit session state and the view models."""
    if "db_initialized" not in st.session_state:
        configure_logging()
        try:
            init_db()
            st.session_state.db_initialized = True
        except Exception as e:
            st.error(f"Failed to initialize profile store: {e}")
            st.session_state.db_initialized = False

    mediator = get_mediator()
    if "text_vm" not in st.session_state:
        st.session_state.text_vm = TextViewModel(mediator)
        st.session_state.person_group_vm = PersonGroupViewModel(mediator)
        st.session_state.face_vm = FaceViewModel(mediator)
        st.session_state.profile_vm = ProfileViewModel(mediator)


def render_request(request: HttpRequest):
    """Render a request descriptor: method, path, body, cost and docs."""
    color = METHOD_COLORS.get(request.http_method, "#6c757d")
    st.markdown(
        f'<span style="background-color: {color}; color: white; padding: 0.2rem 0.5rem; '
        f'border-radius: 0.3rem; font-weight: bold;">{request.http_method}</span> '
        f"<code>{request.path_and_query}</code>",
        unsafe_allow_html=True,
    )
    if request.body:
        st.code(json.dumps(json.loads(request.body), indent=2, ensure_ascii=False), language="json")
    st.caption(f"💰 {request.cost} | 📖 [Documentation]({request.cognitive_service_doc})")


def render_result(title: str, result: str):
    """Render a raw JSON result if present."""
    if not result:
        return
    with st.expander(title, expanded=True):
        try:
            st.json(json.loads(result))
        except json.JSONDecodeError:
            st.code(result)


def render_error(view_model):
    if view_model.error:
        st.error(view_model.error)


def render_sidebar():
    """Render sidebar navigation and the current profile."""
    with st.sidebar:
        st.title("🧠 Cognitive Services Explorer")

        page = st.radio(
            "Navigation",
            ["📝 Text Analytics", "👥 Person Groups", "🙂 Face Detection", "🔑 Profiles", "ℹ️ About"],
            label_visibility="collapsed",
        )

        st.markdown("---")
        profile_vm = st.session_state.profile_vm
        if profile_vm.current is None:
            run(profile_vm.load())
        if profile_vm.current:
            st.success(f"Profile: **{profile_vm.current.name}**")
        else:
            st.warning("No profile configured")

        st.caption(f"v{__version__}")

        return page


def render_text_analytics():
    """Render the Text Analytics page."""
    st.header("📝 Text Analytics")
    vm: TextViewModel = st.session_state.text_vm

    col1, col2 = st.columns([3, 1])
    with col1:
        vm.text = st.text_area("Text", value=vm.text, height=120)
    with col2:
        vm.language = st.text_input("Language", value=vm.language)
        vm.text_api_version = st.selectbox(
            "API version",
            text_requests.SUPPORTED_VERSIONS,
            index=text_requests.SUPPORTED_VERSIONS.index(vm.text_api_version),
        )

    vm.update_requests()

    actions = [
        ("Sentiment", vm.sentiment_analysis, "sentiment_json"),
        ("Key Phrases", vm.key_phrases_analysis, "key_phrase_json"),
        ("Entities", vm.entities_analysis, "entities_json"),
        ("Detect Language", vm.detect_language, "detect_language_json"),
        ("Entity Linking", vm.entity_linking, "entity_linking_json"),
    ]
    if vm.is_preview_api:
        actions.append(("PII Entities", vm.entity_recognition_pii, "entity_recognition_pii_json"))

    for (label, action, result_field), request in zip(actions, vm.requests):
        st.subheader(label)
        render_request(request)
        if st.button(f"▶️ Run {label}", key=f"text_{result_field}"):
            with st.spinner(f"Calling Text API ({label})..."):
                run(action())
            st.session_state.last_text_action = result_field
        if vm.error and st.session_state.get("last_text_action") == result_field:
            st.error(vm.error)
        render_result(f"{label} result", getattr(vm, result_field))
        st.markdown("---")


def render_person_groups():
    """Render the Face API person group page."""
    st.header("👥 Person Groups")
    vm: PersonGroupViewModel = st.session_state.person_group_vm

    col1, col2 = st.columns(2)
    with col1:
        vm.group_id = st.text_input("Person group id", value=vm.group_id, help="Lowercase letters, digits, '-' and '_'")
        vm.name = st.text_input("Name", value=vm.name)
    with col2:
        vm.user_data = st.text_input("User data (optional)", value=vm.user_data)
        vm.recognition_model = st.selectbox(
            "Recognition model",
            face_requests.RECOGNITION_MODELS,
            index=face_requests.RECOGNITION_MODELS.index(vm.recognition_model),
        )

    vm.update_requests()

    group_actions = [
        ("Create", vm.create_group, "create_json"),
        ("Update", vm.update_group, "update_json"),
        ("Get", vm.get_group, "get_json"),
        ("List", vm.list_groups, "list_json"),
        ("Delete", vm.delete_group, "delete_json"),
        ("Train", vm.train_group, "train_json"),
        ("Training Status", vm.check_training, "training_status_json"),
    ]

    cols = st.columns(len(group_actions))
    for col, (label, action, _) in zip(cols, group_actions):
        with col:
            if st.button(label, key=f"group_{label}", use_container_width=True):
                with st.spinner(f"Calling Face API ({label})..."):
                    run(action())

    render_error(vm)
    for label, _, result_field in group_actions:
        render_result(f"{label} result", getattr(vm, result_field))

    with st.expander("📄 Requests", expanded=False):
        for request in vm.requests:
            render_request(request)

    st.markdown("---")
    st.subheader("Persons")

    col1, col2 = st.columns(2)
    with col1:
        vm.person_name = st.text_input("Person name", value=vm.person_name)
        if st.button("➕ Create person"):
            run(vm.create_person())
        if st.button("📋 List persons"):
            run(vm.list_persons())
    with col2:
        vm.person_id = st.text_input("Person id", value=vm.person_id)
        vm.image_url = st.text_input("Face image URL", value=vm.image_url)
        if st.button("🖼️ Add face"):
            run(vm.add_face())

    render_result("Created person", vm.create_person_json)
    render_result("Persons", vm.list_persons_json)
    render_result("Added face", vm.add_face_json)


def render_face_detection():
    """Render the face detection and identification page."""
    st.header("🙂 Face Detection")
    vm: FaceViewModel = st.session_state.face_vm

    vm.image_url = st.text_input("Image URL", value=vm.image_url)
    col1, col2 = st.columns(2)
    with col1:
        vm.recognition_model = st.selectbox(
            "Recognition model",
            face_requests.RECOGNITION_MODELS,
            index=face_requests.RECOGNITION_MODELS.index(vm.recognition_model),
        )
    with col2:
        vm.detection_model = st.selectbox(
            "Detection model",
            face_requests.DETECTION_MODELS,
            index=face_requests.DETECTION_MODELS.index(vm.detection_model),
        )

    vm.update_requests()
    render_request(vm.requests[0])

    if st.button("🔍 Detect faces"):
        with st.spinner("Calling Face API (detect)..."):
            run(vm.detect_faces())

    if vm.image_url:
        st.image(vm.image_url, width=320)

    if vm.face_ids:
        st.info(f"Detected {len(vm.face_ids)} face(s)")

        vm.group_id = st.text_input("Person group id", value=vm.group_id)
        vm.max_candidates = st.number_input("Max candidates", min_value=1, max_value=5, value=vm.max_candidates)
        vm.update_requests()
        if len(vm.requests) > 1:
            render_request(vm.requests[1])

        if st.button("🕵️ Identify"):
            with st.spinner("Calling Face API (identify)..."):
                run(vm.identify_faces())

    render_error(vm)
    render_result("Detected faces", vm.detect_json)
    render_result("Identification", vm.identify_json)


def render_profiles():
    """Render the profile management page."""
    st.header("🔑 Profiles")
    st.markdown("A profile stores the endpoints and subscription keys used for every call.")
    vm: ProfileViewModel = st.session_state.profile_vm

    run(vm.load())

    if vm.profiles:
        for profile in vm.profiles:
            with st.expander(
                f"{'⭐ ' if profile.is_current else ''}{profile.name}",
                expanded=profile.is_current,
            ):
                st.write(f"**Face API:** {profile.face_base_url or '—'} ({'key set' if profile.face_key else 'no key'})")
                st.write(f"**Text API:** {profile.text_base_url or '—'} ({'key set' if profile.text_key else 'no key'})")

                col1, col2 = st.columns(2)
                with col1:
                    if not profile.is_current and st.button("Select", key=f"select_{profile.name}"):
                        run(vm.select(profile.name))
                        st.rerun()
                with col2:
                    if st.button("Delete", key=f"delete_{profile.name}"):
                        run(vm.delete(profile.name))
                        st.rerun()
    else:
        st.info("No profiles yet. Create one below.")

    st.markdown("---")
    st.subheader("Create or update a profile")

    with st.form("profile_form"):
        name = st.text_input("Profile name", placeholder="e.g., westeurope")
        col1, col2 = st.columns(2)
        with col1:
            face_base_url = st.text_input("Face API endpoint", placeholder="https://<region>.api.cognitive.microsoft.com")
            face_key = st.text_input("Face API key", type="password")
        with col2:
            text_base_url = st.text_input("Text API endpoint", placeholder="https://<region>.api.cognitive.microsoft.com")
            text_key = st.text_input("Text API key", type="password")

        submitted = st.form_submit_button("💾 Save profile", use_container_width=True)

    if submitted:
        run(vm.save({
            "name": name,
            "face_base_url": face_base_url,
            "face_key": face_key,
            "text_base_url": text_base_url,
            "text_key": text_key,
        }))

    if vm.error:
        st.error(vm.error)
    elif vm.message:
        st.success(vm.message)


def render_about():
    """Render the about page."""
    st.header("ℹ️ About Cognitive Services Explorer")

    st.markdown("""
    ## Overview

    **Cognitive Services Explorer** lets you try Azure Cognitive Services REST APIs
    (Face and Text Analytics) from the browser. Every page shows the exact request that
    will be sent (method, path, query and body), its estimated cost and a link to the
    operation's documentation.

    ## Text Analytics versions

    | Version | Entity Linking | PII Entities | Opinion Mining |
    |---------|----------------|--------------|----------------|
    | v3.0 (stable) | ✅ | ❌ | ❌ |
    | v3.1-preview.1 | ✅ | ✅ | ✅ |

    Switching version clears previous results, as outputs differ between versions.

    ## Technology Stack

    - **Frontend**: Streamlit
    - **API**: FastAPI
    - **HTTP**: httpx
    - **Profile store**: SQLModel (SQLite / PostgreSQL)
    - **Secrets**: Azure Key Vault via Managed Identity (CLOUD mode)
    """)


def main():
    """Main application entry point."""
    init_session_state()

    if not st.session_state.get("db_initialized", False):
        st.error("⚠️ Profile store not initialized. Please check your configuration.")
        st.stop()

    page = render_sidebar()

    if page == "📝 Text Analytics":
        render_text_analytics()
    elif page == "👥 Person Groups":
        render_person_groups()
    elif page == "🙂 Face Detection":
        render_face_detection()
    elif page == "🔑 Profiles":
        render_profiles()
    elif page == "ℹ️ About":
        render_about()


if __name__ == "__main__":
    main()
