from typing import Callable, List

import streamlit as st

from domain.constants import APP_TITLE
from domain.models import Pet
from services.images import ImageStore
from ui.components import fill_pet_images, pet_card


def view(pets: List[Pet], on_select: Callable[[Pet], None], images: ImageStore):
    """
    Renders every pet as a card, top to bottom, then loads the avatars.

    All cards (and their buttons) are on screen before any image request
    goes out. Selection is reported through `on_select`; this view never
    touches navigation state itself.
    """
    st.header(APP_TITLE)

    if not pets:
        st.info("No pets to show right now.")
        return

    card_slots = [
        pet_card(pet, key=f"pet_card_{i}", on_click=on_select, images=images)
        for i, pet in enumerate(pets)
    ]
    fill_pet_images(card_slots, images)
