"""Tests for directory planning."""

from __future__ import annotations

import pytest

from acul_cli.scaffolder.options import Screen
from acul_cli.scaffolder.planner import BASE_DIRECTORIES, plan_directories


pytestmark = pytest.mark.unit


class TestPlanDirectories:
    def test_base_directories_first(self):
        dirs = plan_directories([Screen.LOGIN])
        assert dirs[: len(BASE_DIRECTORIES)] == list(BASE_DIRECTORIES)

    def test_login_and_passkey(self):
        dirs = plan_directories({Screen.LOGIN, Screen.PASSKEY})
        assert dirs == [
            "src/screens",
            "src/components",
            "src/hooks",
            "src/utils",
            "src/styles",
            "public",
            "src/screens/login-id",
            "src/screens/passkey-enrollment",
        ]

    def test_no_duplicates(self):
        dirs = plan_directories(list(Screen))
        assert len(dirs) == len(set(dirs))
        assert len(dirs) == len(BASE_DIRECTORIES) + len(Screen)

    def test_independent_of_selection_order(self):
        forward = plan_directories([Screen.LOGIN, Screen.MFA, Screen.PASSKEY])
        backward = plan_directories([Screen.PASSKEY, Screen.MFA, Screen.LOGIN])
        assert forward == backward

    def test_empty_selection_gives_base_set(self):
        assert plan_directories([]) == list(BASE_DIRECTORIES)
