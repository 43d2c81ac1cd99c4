from typing import Any, Callable
import asyncio
import logging

import streamlit as st

from film_studio.base_config import ACCEPTED_IMAGE_EXTENSIONS
from film_studio.forms import ModelFormController, Notification, PreviewSlot, StoryboardFormController, reset_session
from film_studio.forms.presenters import model_asset_previews, storyboard_cards, texture_image
from film_studio.generation import GenerationCoordinator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def get_session_object(key: str, factory: Callable[[], Any]) -> Any:
    """Get a per-session object, creating it on first use."""
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def show_notification(notification: Notification):
    icon = "⚠️" if notification.variant == "destructive" else "✅"
    st.toast(f"**{notification.title}** {notification.description}", icon=icon)


def main():
    st.set_page_config(page_title="AI Film Studio", page_icon="🎬", layout="wide")
    show_header()

    # Add reset button to sidebar
    if st.sidebar.button("Reset Forms", type="secondary"):
        reset_session(st.session_state)
        st.rerun()

    show_storyboard_generator()
    st.divider()
    show_model_generator()


def show_header():
    col1, col2 = st.columns([3, 1])
    with col1:
        st.title("🎬 AI Film Studio")
    with col2:
        st.markdown("**Natural Algorithm AI Lab**")
        st.caption("AI R&D Lab")


def show_storyboard_generator():
    st.header("🎞️ AI Storyboard Generator")
    controller = get_session_object(
        "storyboard_controller",
        lambda: StoryboardFormController(GenerationCoordinator())
    )

    script_outline = st.text_area(
        "Script Outline",
        placeholder="Enter your script outline here...",
        height=150,
        key="script_outline",
        help="Provide a detailed outline of your script. The AI will suggest scenes, camera angles, and layouts."
    )

    submit = st.button(
        "Generating..." if controller.is_submitting else "Generate Storyboard",
        key="generate_storyboard",
        type="primary",
        disabled=controller.is_submitting
    )
    if submit:
        with st.spinner("Generating..."):
            asyncio.run(controller.submit({"scriptOutline": script_outline}, show_notification))

    if controller.field_errors.get("scriptOutline"):
        st.error(controller.field_errors["scriptOutline"])

    if controller.result:
        st.subheader("Generated Storyboard:")
        cards = storyboard_cards(controller.result)
        num_cols = 3
        for i in range(0, len(cards), num_cols):
            cols = st.columns(num_cols)
            for j, card in enumerate(cards[i:i + num_cols]):
                with cols[j]:
                    with st.container(border=True):
                        st.markdown(f"#### {card.title}")
                        st.write(f"**Scene:** {card.scene.scene_description}")
                        st.caption(f"📷 {card.scene.camera_angle}")
                        st.caption(f"🔲 {card.scene.scene_layout}")


def show_model_generator():
    st.header("📦 AI 3D Model & Texture Generator")
    controller = get_session_object(
        "model_controller",
        lambda: ModelFormController(GenerationCoordinator())
    )
    preview = get_session_object("concept_art_preview", PreviewSlot)

    col1, col2 = st.columns([3, 1])
    with col1:
        concept_art = st.file_uploader(
            "2D Concept Art",
            type=ACCEPTED_IMAGE_EXTENSIONS,
            key="concept_art",
            help="Upload a 2D image (JPG, PNG, WEBP, max 5MB). It will be the basis of the 3D model."
        )
    with col2:
        preview_path = preview.select(concept_art)
        if preview_path:
            st.image(preview_path, width=80, caption="Concept art preview")

    model_description = st.text_area(
        "Model Description",
        placeholder="Describe the desired 3D model (e.g. style, key features)...",
        height=100,
        key="model_description",
        help="Give details about the model the AI should build from the concept art."
    )

    submit = st.button(
        "Generating model..." if controller.is_submitting else "Generate 3D Model & Texture",
        key="generate_model",
        type="primary",
        disabled=controller.is_submitting
    )
    if submit:
        with st.spinner("Generating model..."):
            asyncio.run(controller.submit(
                {
                    "conceptArt": [concept_art] if concept_art is not None else [],
                    "modelDescription": model_description,
                },
                show_notification
            ))
            st.session_state["submitted_model_description"] = model_description

    if controller.field_errors.get("conceptArt"):
        st.error(controller.field_errors["conceptArt"])
    if controller.field_errors.get("modelDescription"):
        st.error(controller.field_errors["modelDescription"])

    if controller.result:
        st.subheader("Generated Assets:")
        model_asset, texture_asset = model_asset_previews(controller.result)
        description = st.session_state.get("submitted_model_description", model_description)

        model_col, texture_col = st.columns(2)
        with model_col:
            with st.container(border=True):
                st.markdown(f"#### {model_asset.title}")
                st.info("📦 (3D model placeholder)")
                st.download_button(
                    model_asset.download_label,
                    data=model_asset.data,
                    file_name=model_asset.file_name,
                    mime=model_asset.mime_type,
                    key="download_model"
                )
        with texture_col:
            with st.container(border=True):
                st.markdown(f"#### {texture_asset.title}")
                st.image(
                    texture_image(texture_asset, description, controller.coordinator.model_mode),
                    caption="Generated texture"
                )
                st.download_button(
                    texture_asset.download_label,
                    data=texture_asset.data,
                    file_name=texture_asset.file_name,
                    mime=texture_asset.mime_type,
                    key="download_texture"
                )


if __name__ == "__main__":
    main()
