import asyncio
import time
from unittest.mock import MagicMock

import pytest

from domain.models import Pet
from services import images
from services.images import Failed, ImageStore, Loaded, Loading
from services.pets import generate_pets, pet_image_url
from ui.components import cards
from views import pet_details, pet_list


class Screen:
    """Records every markdown write, tagged with the slot it went to."""

    def __init__(self):
        self.events = []
        self.slots = []

    def new_slot(self):
        slot = MagicMock()
        index = len(self.slots)
        slot.markdown.side_effect = lambda body, **kw: self.events.append((index, body))
        self.slots.append(slot)
        return slot

    def last_html(self, index):
        return [body for i, body in self.events if i == index][-1]


@pytest.fixture
def screen():
    return Screen()


@pytest.fixture
def st_mock(monkeypatch, screen):
    mock = MagicMock()
    mock.button.return_value = False
    mock.empty.side_effect = screen.new_slot
    for module in (cards, pet_list, pet_details):
        monkeypatch.setattr(module, "st", mock)
    return mock


@pytest.fixture
def fetches(monkeypatch, screen):
    """Fake avatar loads; each call is logged alongside the screen writes."""
    calls = []

    async def fake_load(url, client):
        calls.append(url)
        screen.events.append(("fetch", url))
        return Loaded(data=b"img")

    monkeypatch.setattr(images, "load_image", fake_load)
    return calls


def test_list_renders_card_per_pet(st_mock, fetches):
    pets = generate_pets()
    pet_list.view(pets, MagicMock(), ImageStore())
    keys = [c.kwargs["key"] for c in st_mock.button.call_args_list]
    assert keys == [f"pet_card_{i}" for i in range(100)]
    assert len(fetches) == 100


@pytest.mark.parametrize("clicked", [0, 1, 57, 99])
def test_list_selection_passes_clicked_pet(st_mock, fetches, clicked):
    pets = generate_pets()
    st_mock.button.side_effect = lambda label, key=None, **kw: key == f"pet_card_{clicked}"
    fetched_at_click = []
    on_select = MagicMock(side_effect=lambda pet: fetched_at_click.append(len(fetches)))
    pet_list.view(pets, on_select, ImageStore())
    on_select.assert_called_once_with(pets[clicked])
    # The click is handled before any avatar request goes out
    assert fetched_at_click == [0]


def test_list_shows_every_spinner_before_any_fetch(st_mock, screen, fetches):
    pets = generate_pets()
    pet_list.view(pets, MagicMock(), ImageStore())

    first_fetch = next(i for i, e in enumerate(screen.events) if e[0] == "fetch")
    before = screen.events[:first_fetch]
    assert len(before) == 100
    assert all("pet-spinner" in body for _, body in before)
    for i, pet in enumerate(pets):
        assert 'alt="A cat"' in screen.last_html(i)
        assert pet.name in screen.last_html(i)


def test_slow_fetches_do_not_add_up(st_mock, monkeypatch):
    async def slow_load(url, client):
        await asyncio.sleep(0.05)
        return Failed(reason="timeout")

    monkeypatch.setattr(images, "load_image", slow_load)
    started = time.monotonic()
    pet_list.view(generate_pets(), MagicMock(), ImageStore())
    # One after another this would take 100 * 0.05s
    assert time.monotonic() - started < 2.5


def test_failed_avatars_stay_failed_across_reruns(st_mock, screen, monkeypatch):
    calls = []

    async def failing_load(url, client):
        calls.append(url)
        return Failed(reason="offline")

    monkeypatch.setattr(images, "load_image", failing_load)
    pets = generate_pets()
    store = ImageStore()

    pet_list.view(pets, MagicMock(), store)
    assert len(calls) == 100

    rerun_start = len(screen.slots)
    pet_list.view(pets, MagicMock(), store)
    assert len(calls) == 100
    for i in range(rerun_start, len(screen.slots)):
        assert "Error indicator" in screen.last_html(i)

    # Rebuilding the screen gives failed avatars another try
    store.forget_failures()
    pet_list.view(pets, MagicMock(), store)
    assert len(calls) == 200


def test_list_empty_shows_message(st_mock, fetches):
    on_select = MagicMock()
    pet_list.view([], on_select, ImageStore())
    st_mock.info.assert_called_once()
    st_mock.button.assert_not_called()
    on_select.assert_not_called()
    assert fetches == []


def test_details_shows_pet(st_mock, screen, fetches):
    pet_details.view(Pet("Cutie #1"), MagicMock(), ImageStore())
    st_mock.header.assert_called_once_with("Cutie #1")
    assert fetches == [pet_image_url(Pet("Cutie #1"))]
    assert "pet-spinner" in screen.events[0][1]
    assert "Cutie #1" in screen.last_html(0)


def test_details_reuses_resolved_avatar(st_mock, screen, fetches):
    pet = Pet("Cutie #4")
    store = ImageStore()
    store.put(pet_image_url(pet), Loaded(data=b"abc"))
    pet_details.view(pet, MagicMock(), store)
    assert fetches == []
    assert "YWJj" in screen.last_html(0)


def test_details_back_invokes_callback(st_mock, fetches):
    st_mock.button.return_value = True
    on_back = MagicMock()
    pet_details.view(Pet("Cutie #1"), on_back, ImageStore())
    on_back.assert_called_once_with()
    assert fetches == []


def test_image_state_html_variants():
    assert "pet-spinner" in cards.image_state_html(Loading())
    assert "Error indicator" in cards.image_state_html(Failed(reason="x"))
    loaded = cards.image_state_html(Loaded(data=b"abc", mime_type="image/png"))
    assert 'src="data:image/png;base64,YWJj"' in loaded


def test_info_label_escapes_name():
    assert "&lt;b&gt;" in cards.pet_info_label("<b>")
