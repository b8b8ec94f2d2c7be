"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.account import render_account_page
from app.pages.manage import render_manage_page
from app.pages.study import render_study_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Study", render=render_study_page),
    AppPage(title="Manage", render=render_manage_page),
    AppPage(title="Account", render=render_account_page),
]
