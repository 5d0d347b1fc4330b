"""Tests for modifier -> PlantUML notation translation."""

from __future__ import annotations

import pytest

from classdiagram.modifiers import member_modifiers_text, type_modifiers_text


class TestMemberModifiers:
    @pytest.mark.parametrize(
        "modifiers, expected",
        [
            (["public"], "+ "),
            (["private"], "- "),
            (["protected"], "# "),
            (["abstract"], "{abstract} "),
            (["static"], "{static} "),
            (["internal"], "<<internal>> "),
            (["override"], "<<override>> "),
        ],
    )
    def test_single_token(self, modifiers, expected):
        assert member_modifiers_text(modifiers) == expected

    def test_order_preserved(self):
        assert member_modifiers_text(["public", "static"]) == "+ {static} "
        assert member_modifiers_text(["static", "public"]) == "{static} + "

    def test_compound_visibility_is_token_wise(self):
        """protected internal is two tokens, mapped independently."""
        assert member_modifiers_text(["protected", "internal"]) == "# <<internal>> "

    def test_readonly_and_async_become_stereotypes(self):
        assert member_modifiers_text(["private", "readonly"]) == "- <<readonly>> "
        assert member_modifiers_text(["public", "async", "virtual"]) == "+ <<async>> <<virtual>> "

    def test_empty(self):
        assert member_modifiers_text([]) == ""
        assert member_modifiers_text(()) == ""

    def test_duplicates_and_conflicts_pass_through(self):
        assert member_modifiers_text(["public", "public"]) == "+ + "
        assert member_modifiers_text(["public", "private"]) == "+ - "

    def test_pure(self):
        mods = ("public", "static")
        assert member_modifiers_text(mods) == member_modifiers_text(mods)
        assert mods == ("public", "static")


class TestTypeModifiers:
    def test_visibility_and_abstract_dropped(self):
        assert type_modifiers_text(["public"]) == ""
        assert type_modifiers_text(["internal", "abstract"]) == ""
        assert type_modifiers_text(["private", "protected"]) == ""

    def test_other_keywords_become_stereotypes(self):
        assert type_modifiers_text(["public", "static", "partial"]) == "<<static>> <<partial>> "
        assert type_modifiers_text(["sealed"]) == "<<sealed>> "

    def test_empty(self):
        assert type_modifiers_text([]) == ""

    def test_duplicates_kept(self):
        assert type_modifiers_text(["partial", "partial"]) == "<<partial>> <<partial>> "
