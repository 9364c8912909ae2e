"""Unit tests for UI input validation and conversion."""

import base64

import pytest

from cinexpress.core.errors import ValidationError
from cinexpress.core.options import Lens, Structure, Tone
from cinexpress.ui.validation import (
    build_options,
    collect_reference_images,
    detect_image_mime,
    image_file_to_upload,
)


class TestDetectImageMime:
    def test_png(self, image_file):
        assert detect_image_mime(image_file) == "image/png"

    def test_text_file_rejected(self, text_file):
        with pytest.raises(ValidationError, match="no es una imagen"):
            detect_image_mime(text_file)


class TestImageFileToUpload:
    def test_reads_and_encodes(self, image_file):
        upload = image_file_to_upload(image_file)

        assert upload.mime_type == "image/png"
        assert upload.name == "reference.png"
        assert len(upload.id) == 9
        assert base64.b64decode(upload.data) == image_file.read_bytes()

    def test_ids_are_unique(self, image_file):
        assert image_file_to_upload(image_file).id != image_file_to_upload(image_file).id

    def test_missing_file(self, temp_dir):
        with pytest.raises(ValidationError, match="Archivo no encontrado"):
            image_file_to_upload(temp_dir / "missing.png")

    def test_to_input(self, image_file):
        upload = image_file_to_upload(image_file)
        image = upload.to_input()
        assert image.data == upload.data
        assert image.mime_type == "image/png"


class TestCollectReferenceImages:
    def test_skips_empty_slots(self, image_file):
        images = collect_reference_images([None, str(image_file), None])
        assert len(images) == 1

    def test_skips_non_images(self, image_file, text_file, caplog):
        images = collect_reference_images([str(text_file), str(image_file)])

        assert [image.name for image in images] == ["reference.png"]
        assert "Skipping reference image" in caplog.text

    def test_keeps_first_three(self, image_file):
        images = collect_reference_images([str(image_file)] * 5)
        assert len(images) == 3

    def test_custom_limit(self, image_file):
        assert len(collect_reference_images([image_file] * 3, limit=1)) == 1


class TestBuildOptions:
    def test_from_labels(self):
        options = build_options(
            Tone.NOIR.value,
            Structure.SCREENPLAY_SCENE.value,
            Lens.ANAMORPHIC.value,
            "Español",
            True,
            False,
        )

        assert options.tone is Tone.NOIR
        assert options.structure is Structure.SCREENPLAY_SCENE
        assert options.lens is Lens.ANAMORPHIC
        assert options.include_examples is True
        assert options.add_reasoning is False

    def test_unknown_value(self):
        with pytest.raises(ValidationError):
            build_options("Telenovela", Structure.SCREENPLAY_SCENE.value, Lens.STANDARD.value, "Español", False, False)
