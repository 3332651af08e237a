"""
Reusable UI components for the pet adoption app.

- `base`: page-wide CSS injection.
- `cards`: the pet card, its image states and the name label.

Import from here (`from ui import components`) rather than from the modules.
"""

from .base import (
    inject_base_css,
)

from .cards import (
    fill_pet_images,
    image_state_html,
    pet_card,
    pet_image,
    pet_info_label,
    render_image_state,
)
