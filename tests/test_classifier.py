"""Tests for string table classification.

Covers:
- extract_parameters: placeholder scanning, punctuation and CJK boundaries
- find_plural_groups: the Other requirement and canonical category order
- classify_table: simple/parametrized/plural partition, default intersection
- Category mapping helpers and their loud failure on unknown input

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from arbgen.classify import (
    PluralGroup,
    category_from_suffix,
    category_from_value,
    classify_table,
    extract_parameters,
    find_plural_groups,
    plural_parameter,
    value_for_category,
)
from arbgen.diagnostics import InvalidPluralCategoryError
from arbgen.enums import PluralCategory
from tests.strategies import locale_tables, plural_families, string_tables


class TestExtractParameters:
    """Placeholder scanning."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello $name", ("name",)),
            ("Hello $name!", ("name",)),
            ("$first and $second", ("first", "second")),
            ("$count of $count", ("count",)),
            ("$b then $a", ("b", "a")),
            ("No placeholders", ()),
            ("Costs $", ()),
            ("$user_name", ("user",)),
            ("$a.$b", ("a", "b")),
            ("$name–$other", ("name", "other")),
            ("こんにちは$nameさん", ("name",)),
            ("$name様", ("name",)),
            ("$nameカード", ("name",)),
            ("$城", ()),
        ],
    )
    def test_extract(self, text: str, expected: tuple[str, ...]) -> None:
        """Names end at punctuation, whitespace, CJK text or an en dash."""
        assert extract_parameters(text) == expected

    def test_non_latin_letters_belong_to_name(self) -> None:
        """Scripts outside the excluded ranges are part of the name."""
        assert extract_parameters("Привет $имя!") == ("имя",)

    def test_late_han_extension_ends_name(self) -> None:
        """Han ideographs beyond the first supplementary blocks end a name too."""
        assert extract_parameters(f"$name{chr(0x31350)}") == ("name",)
        assert extract_parameters(f"$name{chr(0x2EBF0)}") == ("name",)

    @pytest.mark.parametrize("code_point", [0x30A0, 0x30FB, 0x30FC, 0xFF70, 0xFF9E, 0xFF9F])
    def test_common_script_kana_marks_belong_to_name(self, code_point: int) -> None:
        """Prolonged sound and middle dot marks are Common script, not Katakana."""
        mark = chr(code_point)
        assert extract_parameters(f"$name{mark} x") == (f"name{mark}",)

    @given(names=st.lists(st.from_regex(r"[a-z][a-zA-Z0-9]{0,6}", fullmatch=True), min_size=1))
    def test_distinct_first_seen_order(self, names: list[str]) -> None:
        """Parameters are distinct and ordered by first occurrence."""
        text = " ".join(f"${name}" for name in names)
        result = extract_parameters(text)
        assert result == tuple(dict.fromkeys(names))
        event(f"duplicates={len(names) != len(result)}")


class TestPluralParameter:
    """Parameter name of plural accessors."""

    def test_first_placeholder_of_other(self) -> None:
        """The first placeholder of the Other template names the parameter."""
        assert plural_parameter("$count items in $box") == "count"

    def test_default_when_other_has_no_placeholder(self) -> None:
        """Without a placeholder the parameter is called count."""
        assert plural_parameter("N items") == "count"


class TestFindPluralGroups:
    """Plural group detection."""

    def test_group_requires_other(self) -> None:
        """Suffixed ids without an Other sibling do not form a group."""
        assert find_plural_groups(["itemsOne", "itemsTwo"]) == {}

    def test_group_with_other(self) -> None:
        """Categories are returned in canonical order regardless of table order."""
        groups = find_plural_groups(["itemsOther", "itemsMany", "itemsZero"])
        assert groups == {
            "items": (PluralCategory.ZERO, PluralCategory.MANY, PluralCategory.OTHER)
        }

    def test_groups_in_first_seen_order(self) -> None:
        """Groups are ordered by the first member found in the ids."""
        groups = find_plural_groups(["bOne", "aOther", "bOther", "title"])
        assert list(groups) == ["b", "a"]

    def test_suffix_must_end_id(self) -> None:
        """A category word inside an id does not make it a plural."""
        assert find_plural_groups(["OtherThings", "itemsOtherx"]) == {}

    def test_bare_category_is_not_plural(self) -> None:
        """An id equal to a category name has no base and stays plain."""
        assert find_plural_groups(["Other", "One"]) == {}

    @given(family=plural_families())
    def test_grouping_law(self, family: tuple[str, dict[str, str]]) -> None:
        """Suffixed ids form a group iff the Other member is present."""
        base, members = family
        has_other = f"{base}Other" in members
        event(f"has_other={has_other}")
        groups = find_plural_groups(list(members))
        assert (base in groups) == has_other


class TestClassifyTable:
    """Partition of a locale table."""

    def test_scenario_parametrized_default(self) -> None:
        """A placeholder makes the string a method with one parameter."""
        table = {"greeting": "Hello $name"}
        result = classify_table("en", table, table)
        assert result.simple == ()
        (entry,) = result.parametrized
        assert entry.id == "greeting"
        assert entry.parameters == ("name",)
        assert entry.text == "Hello $name"

    def test_scenario_one_without_other(self) -> None:
        """itemsOne without itemsOther is a plain getter named itemsOne."""
        table = {"itemsOne": "1 item"}
        result = classify_table("en", table, table)
        assert [e.id for e in result.simple] == ["itemsOne"]
        assert result.plurals == ()

    def test_scenario_plural_group(self) -> None:
        """itemsOther + itemsOne form one plural accessor named items."""
        table = {"itemsOther": "$count items", "itemsOne": "1 item"}
        result = classify_table("en", table, table)
        assert result.simple == ()
        assert result.parametrized == ()
        (group,) = result.plurals
        assert group.base == "items"
        assert group.categories == (PluralCategory.ONE, PluralCategory.OTHER)
        assert group.parameter == "count"
        assert group.text_for(PluralCategory.ONE) == "1 item"

    def test_output_order(self) -> None:
        """Simple ids, then parametrized ids, then plural groups, each in table order."""
        table = {
            "p1": "Hi $a",
            "s1": "One",
            "xOther": "$n x",
            "p2": "Bye $b",
            "s2": "Two",
        }
        result = classify_table("en", table, table)
        assert result.accessor_names == ("s1", "s2", "p1", "p2", "x")

    def test_ids_absent_from_default_are_dropped(self) -> None:
        """Locale-only ids never reach the classified table."""
        default = {"title": "Title", "greeting": "Hello $name"}
        local = {"title": "Titre", "extra": "Only here", "greeting": "Salut $name"}
        result = classify_table("fr", local, default)
        assert result.dropped == ("extra",)
        assert result.accessor_names == ("title", "greeting")

    def test_plural_regroups_per_locale(self) -> None:
        """A locale lacking Other turns the shared members into plain overrides."""
        default = {"itemsOne": "1 item", "itemsOther": "$count items"}
        local = {"itemsOne": "1 élément"}
        result = classify_table("fr", local, default)
        assert [e.id for e in result.simple] == ["itemsOne"]
        assert result.plurals == ()

    def test_empty_table(self) -> None:
        """An empty locale table overrides nothing."""
        result = classify_table("fr", {}, {"title": "Title"})
        assert result.is_empty
        assert result.dropped == ()

    @given(data=st.data(), default=string_tables(min_size=1))
    def test_subtype_exposes_default_intersection(
        self, data: st.DataObject, default: dict[str, str]
    ) -> None:
        """Classified ids are exactly the ids shared with the default table."""
        local = data.draw(locale_tables(default))
        result = classify_table("de", local, default)
        assert result.string_ids == frozenset(local) & frozenset(default)
        assert set(result.dropped) == set(local) - set(default)


class TestCategoryMapping:
    """Switch literals and suffix parsing."""

    @pytest.mark.parametrize(
        ("value", "category"),
        [
            ("0", PluralCategory.ZERO),
            ("1", PluralCategory.ONE),
            ("2", PluralCategory.TWO),
            ("few", PluralCategory.FEW),
            ("many", PluralCategory.MANY),
        ],
    )
    def test_value_round_trip(self, value: str, category: PluralCategory) -> None:
        """Each switch literal maps to exactly one category and back."""
        assert category_from_value(value) is category
        assert value_for_category(category) == value

    @pytest.mark.parametrize("value", ["3", "other", "One", "", "zero"])
    def test_unknown_value_fails_loudly(self, value: str) -> None:
        """Unknown switch literals raise an invalid-argument error."""
        with pytest.raises(InvalidPluralCategoryError):
            category_from_value(value)

    def test_error_is_value_error(self) -> None:
        """InvalidPluralCategoryError is catchable as ValueError."""
        with pytest.raises(ValueError, match="not valid"):
            category_from_value("7")

    def test_other_has_no_switch_value(self) -> None:
        """Other is the default branch and has no literal."""
        with pytest.raises(InvalidPluralCategoryError):
            value_for_category(PluralCategory.OTHER)

    def test_suffix_parsing(self) -> None:
        """Suffixes parse to categories; anything else fails loudly."""
        assert category_from_suffix("Few") is PluralCategory.FEW
        with pytest.raises(InvalidPluralCategoryError):
            category_from_suffix("Several")


class TestPluralGroup:
    """PluralGroup accessors."""

    def test_member_ids_and_missing_category(self) -> None:
        """member_ids lists full ids; text_for raises for absent categories."""
        group = PluralGroup(
            base="apples",
            variants=((PluralCategory.ONE, "an apple"), (PluralCategory.OTHER, "$n apples")),
            parameter="n",
        )
        assert group.member_ids == ("applesOne", "applesOther")
        with pytest.raises(KeyError):
            group.text_for(PluralCategory.FEW)
