from typing import Callable

import streamlit as st

from domain.models import Pet
from services.images import ImageStore
from ui.components import fill_pet_images, pet_image


def view(pet: Pet, on_back: Callable[[], None], images: ImageStore):
    st.header(pet.name)

    if st.button("◀ Back to list", key="details_back"):
        on_back()
        return

    with st.container(border=True):
        card_slot = pet_image(pet, images)
    fill_pet_images([card_slot], images)
