import logging
import sys

import streamlit as st

from domain.constants import APP_TITLE
from domain.models import Pet, Route
from services.images import ImageStore
from services.navigation import NavigationState
from services.pets import generate_pets
from ui.components import inject_base_css

# Import the page rendering functions from the view modules
from views import pet_details, pet_list

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a route key to its label and the view that renders it.
PAGE_REGISTRY = {
    Route.LIST.value: {
        "label": "🐾 Pets",
        "render_func": pet_list.view,
    },
    Route.DETAILS.value: {
        "label": "🐱 Pet details",
        "render_func": pet_details.view,
    },
}


def setup_logging():
    """Console logging for local runs. No-op if logging is already configured."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _pets():
    # Built once per session and shared by reference with the navigation layer.
    if 'pets' not in st.session_state:
        st.session_state['pets'] = generate_pets()
    return st.session_state['pets']


def _navigation() -> NavigationState:
    if 'nav' not in st.session_state:
        st.session_state['nav'] = NavigationState.from_query_params(st.query_params)
    return st.session_state['nav']


def _images() -> ImageStore:
    if 'images' not in st.session_state:
        st.session_state['images'] = ImageStore()
    return st.session_state['images']


def _sync_query_params(nav: NavigationState):
    params = nav.to_query_params()
    if dict(st.query_params) != params:
        st.query_params.clear()
        st.query_params.update(params)


def main():
    """
    Main application router.

    Resolves the current route from the session's NavigationState and renders
    the matching view. A details route with a missing or invalid index falls
    back to the list.
    """
    pets = _pets()
    nav = _navigation()
    images = _images()

    # Resolving first lets an invalid details link land on the list page.
    pet = nav.resolve(pets)
    _sync_query_params(nav)
    page = PAGE_REGISTRY[nav.route.value]

    st.set_page_config(page_title=f"{page['label']} | {APP_TITLE}",
                       page_icon="🐾", layout="centered")
    inject_base_css()

    def _leave_screen():
        # The next screen is rebuilt, so failed avatars get one more try there.
        images.forget_failures()
        _sync_query_params(nav)
        st.rerun()

    def select(selected: Pet):
        nav.open_details_for(selected, pets)
        _leave_screen()

    def back():
        nav.back_to_list()
        _leave_screen()

    if pet is not None:
        page["render_func"](pet, back, images)
    else:
        page["render_func"](pets, select, images)


if __name__ == "__main__":
    setup_logging()
    main()
