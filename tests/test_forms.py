from base64 import b64encode

import pytest
from starlette.datastructures import FormData

from brand_admin.exceptions import BrandValidationException
from brand_admin.forms import BrandForm, FormText, image_from_data_url
from brand_admin.models import BilingualList, ImageFile


def valid_form(**overrides) -> BrandForm:
    fields = {
        "slug": "atlas-plast",
        "name": "Atlas Plast",
        "origin": FormText(en="Egypt", ar="مصر"),
        "description": FormText(en="Pipes", ar="أنابيب"),
    }
    fields.update(overrides)
    return BrandForm(**fields)


class TestValidation:
    def test_valid_form_has_no_errors(self):
        assert valid_form().validate_fields() == {}

    def test_empty_form_reports_every_required_field(self):
        errors = BrandForm().validate_fields()

        assert errors == {
            "name": "Brand name is required",
            "slug": "Slug is required",
            "origin.en": "English origin is required",
            "origin.ar": "Arabic origin is required",
            "description.en": "English description is required",
            "description.ar": "Arabic description is required",
        }

    def test_slug_pattern(self):
        errors = valid_form(slug="Atlas Plast").validate_fields()

        assert errors == {
            "slug": "Slug can only contain lowercase letters, numbers, and hyphens"
        }

    def test_established_year(self):
        errors = valid_form(established="98").validate_fields()

        assert errors == {"established": "Established year must be a 4-digit year"}

    def test_to_create_raises_with_errors(self):
        with pytest.raises(BrandValidationException) as exc_info:
            valid_form(name="").to_create()

        assert exc_info.value.errors == {"name": "Brand name is required"}
        assert exc_info.value.field == "name"

    def test_to_update_sends_cleared_optionals(self):
        payload = valid_form(website="", established="").to_update().to_payload()

        assert payload["website"] is None
        assert payload["established"] is None
        assert payload["slug"] == "atlas-plast"


class TestActions:
    def test_add_reads_pending_input(self):
        form = valid_form()
        data = FormData([("new.products.en", "  Valves ")])

        updated = form.apply_action("add:products:en", data)

        assert updated.products.en == ["Valves"]
        assert form.products.en == []

    def test_remove_advantage(self):
        form = valid_form(brand_advantages=BilingualList(ar=["متين", "رخيص"]))

        updated = form.apply_action("remove:brandAdvantages:ar:0", FormData())

        assert updated.brand_advantages.ar == ["رخيص"]

    @pytest.mark.parametrize(
        "action", ["add:colors:en", "add:products:fr", "remove:products:en:x", "nonsense"]
    )
    def test_unknown_actions_leave_form_unchanged(self, action):
        form = valid_form()

        assert form.apply_action(action, FormData()) is form


class TestImages:
    def test_data_url_round_trip(self):
        image = ImageFile(filename="logo.png", content=b"\x89PNG\r\n", content_type="image/png")

        restored = image_from_data_url(image.preview_url(), "logo.png")

        assert restored == image

    @pytest.mark.parametrize(
        "value", ["", "not a data url", "data:image/png;base64,@@@"]
    )
    def test_bad_data_url_is_dropped(self, value):
        assert image_from_data_url(value, "x.png") is None

    async def test_previews_restore_images_when_no_new_upload(self):
        preview = "data:image/png;base64," + b64encode(b"g1").decode()
        data = FormData(
            [
                ("galleryImages.preview", preview),
                ("galleryImages.filename", "g1.png"),
                ("logo.preview", preview),
                ("logo.filename", "logo.png"),
            ]
        )

        form = await BrandForm.from_form_data(data)

        assert form.logo.filename == "logo.png"
        assert [image.content for image in form.gallery_images] == [b"g1"]
        assert form.main_image is None
