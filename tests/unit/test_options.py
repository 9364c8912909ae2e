"""Unit tests for the option model."""

import pytest

from cinexpress.core.errors import ValidationError
from cinexpress.core.options import (
    LENS_EFFECTS,
    Lens,
    OutputLanguage,
    PromptOptions,
    Structure,
    StructuralMode,
    Tone,
    coerce_option,
    option_catalog,
    structural_mode,
)


class TestEnumerations:
    """The option sets are closed and have the documented sizes."""

    def test_tone_has_eight_values(self):
        assert len(Tone) == 8

    def test_structure_has_seven_values(self):
        assert len(Structure) == 7
        assert Structure.SYNOPSIS in Structure

    def test_lens_has_six_values(self):
        assert len(Lens) == 6

    def test_language_has_five_values(self):
        assert len(OutputLanguage) == 5

    def test_every_lens_has_an_optical_effect(self):
        assert set(LENS_EFFECTS) == set(Lens)


class TestStructuralMode:
    """Each structure maps to exactly one of the four instruction modes."""

    @pytest.mark.parametrize(
        "structure, expected",
        [
            (Structure.VISUAL_PROMPT, StructuralMode.VISUAL),
            (Structure.SCREENPLAY_SCENE, StructuralMode.SCREENPLAY),
            (Structure.SYNOPSIS, StructuralMode.SYNOPSIS),
            (Structure.LOGLINE, StructuralMode.STORY),
            (Structure.CHARACTER_BIO, StructuralMode.STORY),
            (Structure.STORY_BEATS, StructuralMode.STORY),
            (Structure.DIRECTORS_TREATMENT, StructuralMode.STORY),
        ],
    )
    def test_mode_mapping(self, structure, expected):
        assert structural_mode(structure) is expected

    def test_all_structures_mapped(self):
        for structure in Structure:
            assert structural_mode(structure) in StructuralMode


class TestCoerceOption:
    """Tests for coerce_option."""

    def test_accepts_member(self):
        assert coerce_option(Lens, Lens.ANAMORPHIC) is Lens.ANAMORPHIC

    def test_accepts_label(self):
        assert coerce_option(Lens, Lens.TELEPHOTO.value) is Lens.TELEPHOTO

    def test_accepts_member_name(self):
        assert coerce_option(Tone, "NOIR") is Tone.NOIR

    def test_rejects_unknown_value(self):
        with pytest.raises(ValidationError, match="Lens"):
            coerce_option(Lens, "Fisheye 8mm")

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            coerce_option(Tone, 3)


class TestPromptOptions:
    """Tests for the PromptOptions record."""

    def test_defaults(self):
        options = PromptOptions()
        assert options.tone is Tone.CINEMATIC
        assert options.structure is Structure.VISUAL_PROMPT
        assert options.lens is Lens.STANDARD
        assert options.language is OutputLanguage.ENGLISH
        assert options.include_examples is False
        assert options.add_reasoning is False

    def test_coerces_raw_strings(self):
        options = PromptOptions(tone="HORROR", lens=Lens.PORTRAIT.value)
        assert options.tone is Tone.HORROR
        assert options.lens is Lens.PORTRAIT

    def test_invalid_value_raises(self):
        with pytest.raises(ValidationError):
            PromptOptions(structure="Musical")

    def test_is_immutable(self):
        options = PromptOptions()
        with pytest.raises(AttributeError):
            options.tone = Tone.NOIR

    def test_mode_property(self):
        assert PromptOptions(structure=Structure.SYNOPSIS).mode is StructuralMode.SYNOPSIS

    def test_to_dict_uses_labels(self):
        data = PromptOptions(lens=Lens.ANAMORPHIC, include_examples=True).to_dict()
        assert data["lens"] == Lens.ANAMORPHIC.value
        assert data["include_examples"] is True


def test_option_catalog_lists_every_value():
    catalog = option_catalog()
    assert catalog["tones"] == [t.value for t in Tone]
    assert len(catalog["structures"]) == 7
    assert len(catalog["lenses"]) == 6
    assert len(catalog["languages"]) == 5
