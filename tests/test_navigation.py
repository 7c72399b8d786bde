from contextlib import nullcontext

import pytest

from wood_inventory.ui import navigation


class FakeSidebarStreamlit:
    def __init__(self):
        self.sidebar = nullcontext()
        self.links = []
        self.buttons = []

    def page_link(self, page, label):
        self.links.append(page)

    def button(self, label):
        self.buttons.append(label)
        return True


@pytest.fixture
def fake_st(monkeypatch):
    fake = FakeSidebarStreamlit()
    monkeypatch.setattr(navigation, "st", fake)
    return fake


def test_sidebar_links_every_page_and_nothing_else(fake_st):
    navigation.render_sidebar_nav()
    assert fake_st.links == [
        "main_app.py",
        "pages/1_Inventory.py",
        "pages/2_Suppliers.py",
        "pages/3_Stock_Movements.py",
        "pages/4_Reports.py",
    ]
    assert fake_st.buttons == []
