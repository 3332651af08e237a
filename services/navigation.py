"""Navigation controller for the two-screen app.

The state object is owned by the caller (``app.main`` keeps it in
``st.session_state``) and handed to the views, so nothing here touches
Streamlit directly.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from domain.constants import INDEX_PARAM, PAGE_PARAM
from domain.models import Pet, Route
from services.pets import pet_at

logger = logging.getLogger(__name__)


def _parse_index(raw) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


@dataclass
class NavigationState:
    route: Route = Route.LIST
    index: Optional[int] = None

    def open_details(self, index: Optional[int]):
        self.route = Route.DETAILS
        self.index = index

    def open_details_for(self, pet: Pet, pets: List[Pet]):
        """Selection callback: look up the record's position and open it."""
        index = pets.index(pet) if pet in pets else None
        self.open_details(index)

    def back_to_list(self):
        self.route = Route.LIST
        self.index = None

    def resolve(self, pets: List[Pet]) -> Optional[Pet]:
        """Return the pet to show on the details screen.

        A missing or out-of-range index sends the state back to the list.
        """
        if self.route != Route.DETAILS:
            return None
        pet = pet_at(pets, self.index)
        if pet is None:
            logger.info("Invalid details index %r, redirecting to %s",
                        self.index, Route.LIST.value)
            self.back_to_list()
        return pet

    def to_query_params(self) -> Dict[str, str]:
        params = {PAGE_PARAM: self.route.value}
        if self.route == Route.DETAILS and self.index is not None:
            params[INDEX_PARAM] = str(self.index)
        return params

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> 'NavigationState':
        page = params.get(PAGE_PARAM)
        if page == Route.DETAILS.value:
            return cls(Route.DETAILS, _parse_index(params.get(INDEX_PARAM)))
        return cls()
