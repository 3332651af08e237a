import base64
import html
from typing import Callable, List, Tuple

import streamlit as st

from domain.constants import IMAGE_ALT_TEXT
from domain.models import Pet
from services.images import Failed, ImageState, ImageStore, Loaded, resolve_images
from services.pets import pet_image_url

# (avatar url, label, slot) for a drawn card awaiting its image
CardSlot = Tuple[str, str, object]


def pet_info_label(label: str) -> str:
    """Name strip pinned to the bottom edge of a card."""
    return f'<div class="pet-label">{html.escape(label)}</div>'


def image_state_html(state: ImageState) -> str:
    """Map an image visual state to the card's background markup."""
    if isinstance(state, Loaded):
        encoded = base64.b64encode(state.data).decode('ascii')
        return (f'<img class="pet-image" alt="{IMAGE_ALT_TEXT}" '
                f'src="data:{state.mime_type};base64,{encoded}"/>')
    if isinstance(state, Failed):
        return ('<div class="pet-center">'
                '<span class="pet-error" role="img" aria-label="Error indicator">&#9888;</span>'
                '</div>')
    return '<div class="pet-center"><div class="pet-spinner"></div></div>'


def render_image_state(state: ImageState, label: str, slot):
    slot.markdown(
        f'<div class="pet-card">{image_state_html(state)}{pet_info_label(label)}</div>',
        unsafe_allow_html=True,
    )


def pet_image(pet: Pet, images: ImageStore) -> CardSlot:
    """Draw the card body in its current state (spinner until resolved)."""
    url = pet_image_url(pet)
    slot = st.empty()
    render_image_state(images.get(url), pet.name, slot)
    return url, pet.name, slot


def fill_pet_images(card_slots: List[CardSlot], images: ImageStore):
    """Fetch every unresolved avatar at once and redraw each slot as it lands."""
    by_url = {}
    for url, label, slot in card_slots:
        by_url.setdefault(url, []).append((label, slot))

    def show(url: str, state: ImageState):
        images.put(url, state)
        for label, slot in by_url[url]:
            render_image_state(state, label, slot)

    resolve_images(images.pending(by_url), show)


def pet_card(pet: Pet, key: str, on_click: Callable[[Pet], None],
             images: ImageStore) -> CardSlot:
    """
    Displays one pet as a bordered card with a select button.

    The image is left in its current state; pass the returned slot to
    `fill_pet_images` once every card is on screen.
    """
    with st.container(border=True):
        card_slot = pet_image(pet, images)
        if st.button(f"Meet {pet.name}", key=key):
            on_click(pet)
    return card_slot
