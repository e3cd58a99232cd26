import re
from datetime import date

import pytest

from studio.core.errors import ConflictError, NotFoundError, ValidationError
from studio.models.shoot import ShootType
from studio.schemas.client import ClientUpdate
from studio.schemas.image import ImageCreate, ImageUpdate
from studio.schemas.shoot import ShootCreate
from studio.services import clients as client_service
from studio.services import images as image_service
from studio.services import sequencing
from studio.services import shoots as shoot_service


# Clients

def test_client_slug_is_derived_from_name(make_client):
    client = make_client("Sarah Johnson")
    assert client.slug == "sarah-johnson"
    assert client.user_id == "staff-1"


def test_client_slug_collision_is_a_conflict(make_client):
    make_client("Sarah Johnson", email="sarah@example.com")
    with pytest.raises(ConflictError):
        make_client("sarah  johnson!", email="other@example.com")


def test_client_email_must_be_unique(make_client):
    make_client("Sarah Johnson", email="sarah@example.com")
    with pytest.raises(ConflictError):
        make_client("Sarah Jones", email="sarah@example.com")


def test_renaming_keeps_slug_until_regenerated(db, make_client):
    client = make_client("Sarah Johnson")

    client = client_service.update_client(db, client.id, ClientUpdate(name="Sarah Johnson-Smith"))
    assert client.slug == "sarah-johnson"

    client = client_service.regenerate_client_slug(db, client.id)
    assert client.slug == "sarah-johnson-smith"


def test_regenerate_slug_refuses_a_taken_slug(db, make_client):
    make_client("Michael Smith", email="michael@example.com")
    client = make_client("Mike Smith", email="mike@example.com")
    client_service.update_client(db, client.id, ClientUpdate(name="Michael Smith"))

    with pytest.raises(ConflictError):
        client_service.regenerate_client_slug(db, client.id)
    assert client_service.get_client(db, client.id).slug == "mike-smith"


def test_client_with_shoots_cannot_be_deleted(db, make_client, make_shoot):
    client = make_client()
    make_shoot(client=client)

    with pytest.raises(ConflictError):
        client_service.delete_client(db, client.id)

    empty = make_client("Michael Smith", email="michael@example.com")
    client_service.delete_client(db, empty.id)
    with pytest.raises(NotFoundError):
        client_service.get_client(db, empty.id)


# Shoots

def test_shoot_slug_derived_from_title_suffix_and_year(make_shoot):
    shoot = make_shoot("Sarah & Tom Wedding")
    assert shoot.custom_slug == f"sarah-tom-wedding-gallery-{date.today().year}"
    assert re.fullmatch(r"sarah-tom-wedding-[a-z0-9]+-\d{4}", shoot.custom_slug)
    assert shoot.display_title == "Sarah & Tom Wedding"


def test_same_title_same_year_is_a_conflict(make_client, make_shoot):
    client = make_client()
    make_shoot("Sarah & Tom Wedding", client=client)
    with pytest.raises(ConflictError):
        make_shoot("sarah & tom WEDDING!", client=client)


def test_custom_slug_is_normalized_and_unique(make_client, make_shoot):
    client = make_client()
    shoot = make_shoot("Beach Session", client=client, custom_slug="Camps Bay Sunset")
    assert shoot.custom_slug == "camps-bay-sunset"

    with pytest.raises(ConflictError):
        make_shoot("Another Session", client=client, custom_slug="camps-bay-sunset")


def test_create_shoot_requires_text_fields(db, make_client):
    client = make_client()
    with pytest.raises(ValidationError) as exc:
        shoot_service.create_shoot(db, ShootCreate(
            client_id=client.id, title="   ", shoot_type=ShootType.portrait,
            shoot_date=date(2024, 1, 15), location="Kirstenbosch",
        ))
    assert exc.value.field == "title"


def test_create_shoot_for_unknown_client(db):
    with pytest.raises(NotFoundError):
        shoot_service.create_shoot(db, ShootCreate(
            client_id=999, title="Portraits", shoot_type="portrait",
            shoot_date=date(2024, 1, 15), location="Kirstenbosch",
        ))


def test_update_shoot_merges_fields_and_refuses_id(db, make_shoot):
    shoot = make_shoot()
    updated = shoot_service.update_shoot(db, shoot.id, {"location": "La Paris Estate", "custom_title": "A Love Story"})
    assert updated.location == "La Paris Estate"
    assert updated.title == "Sarah & Tom Wedding"
    assert updated.display_title == "A Love Story"

    with pytest.raises(ValidationError):
        shoot_service.update_shoot(db, shoot.id, {"id": 42})
    with pytest.raises(NotFoundError):
        shoot_service.update_shoot(db, 999, {"location": "Nowhere"})


def test_update_shoot_refuses_cover_from_another_shoot(db, make_client, make_shoot, make_images):
    client = make_client()
    shoot = make_shoot("Portraits", client=client)
    other = make_shoot("Headshots", client=client)
    own = make_images(shoot, 1)[0]
    foreign = make_images(other, 1)[0]

    with pytest.raises(ValidationError) as exc:
        shoot_service.update_shoot(db, shoot.id, {"banner_image_id": foreign.id, "location": "Elsewhere"})
    assert exc.value.field == "bannerImageId"
    with pytest.raises(NotFoundError):
        shoot_service.update_shoot(db, shoot.id, {"banner_image_id": 999})

    refreshed = shoot_service.get_shoot(db, shoot.id)
    assert refreshed.banner_image_id is None
    assert refreshed.location == "Franschhoek"

    assert shoot_service.update_shoot(db, shoot.id, {"banner_image_id": own.id}).banner_image_id == own.id


@pytest.mark.parametrize("field", ["client_id", "shoot_type", "is_private", "seo_tags"])
def test_update_shoot_refuses_null_for_required_columns(db, make_shoot, field):
    shoot = make_shoot()
    with pytest.raises(ValidationError):
        shoot_service.update_shoot(db, shoot.id, {field: None})


def test_listing_public_and_by_client(db, make_client, make_shoot):
    sarah = make_client()
    michael = make_client("Michael Smith", email="michael@example.com")
    public = make_shoot("Sarah Portraits", client=sarah)
    make_shoot("Private Preview", client=sarah, is_private=True)
    make_shoot("Smith Corporate", client=michael)

    assert {s.title for s in shoot_service.list_shoots_by_client(db, sarah.id)} == {"Sarah Portraits", "Private Preview"}
    assert public.id in {s.id for s in shoot_service.list_public_shoots(db)}
    assert "Private Preview" not in {s.title for s in shoot_service.list_public_shoots(db)}
    assert {s.title for s in shoot_service.list_shoots_for_client_email(db, "michael@example.com")} == {"Smith Corporate"}
    assert shoot_service.list_shoots_for_client_email(db, "nobody@example.com") == []


def test_reassign_shoot_validates_target_client(db, make_client, make_shoot):
    sarah = make_client()
    michael = make_client("Michael Smith", email="michael@example.com")
    shoot = make_shoot(client=sarah)

    with pytest.raises(NotFoundError):
        shoot_service.reassign_shoot_to_client(db, shoot.id, 999)
    assert shoot_service.get_shoot(db, shoot.id).client_id == sarah.id

    shoot = shoot_service.reassign_shoot_to_client(db, shoot.id, michael.id)
    assert shoot.client_id == michael.id


def test_gallery_views_only_go_up(db, make_shoot):
    shoot = make_shoot()
    shoot_service.record_gallery_view(db, shoot)
    shoot = shoot_service.record_gallery_view(db, shoot)
    assert shoot.view_count == 2


def test_delete_shoot_removes_its_images(db, make_shoot, make_images):
    shoot = make_shoot()
    images = make_images(shoot)

    shoot_service.delete_shoot(db, shoot.id)

    with pytest.raises(NotFoundError):
        shoot_service.get_shoot(db, shoot.id)
    with pytest.raises(NotFoundError):
        image_service.get_image(db, images[0].id)


# Images

def test_images_are_appended_in_sequence(db, make_shoot, make_images):
    shoot = make_shoot()
    images = make_images(shoot, 3)
    assert [image.sequence for image in images] == [1, 2, 3]

    with pytest.raises(NotFoundError):
        image_service.create_image(db, ImageCreate(shoot_id=999, filename="x.jpg", storage_path="x.jpg"))


def test_delete_image_leaves_gap_and_clears_cover(db, make_shoot, make_images):
    shoot = make_shoot()
    first, second, third = make_images(shoot, 3)
    sequencing.set_cover(db, shoot.id, second.id)

    image_service.delete_image(db, second.id)

    remaining = shoot_service.get_shoot_images(db, shoot.id)
    assert [(image.id, image.sequence) for image in remaining] == [(first.id, 1), (third.id, 3)]
    assert shoot_service.get_shoot(db, shoot.id).banner_image_id is None
    with pytest.raises(NotFoundError):
        image_service.delete_image(db, second.id)

    fourth = image_service.create_image(db, ImageCreate(shoot_id=shoot.id, filename="4.jpg", storage_path="4.jpg"))
    assert fourth.sequence == 4


def test_moving_image_to_archive_shoot(db, make_client, make_shoot, make_images):
    client = make_client()
    gallery = make_shoot("Wedding Gallery", client=client)
    archive = make_shoot("Wedding Archive", client=client, is_private=True)
    cover, other = make_images(gallery, 2)
    archived_before = make_images(archive, 1)[0]
    sequencing.set_cover(db, gallery.id, cover.id)

    moved = image_service.update_image(db, cover.id, ImageUpdate(shoot_id=archive.id))

    assert moved.shoot_id == archive.id
    assert moved.sequence == archived_before.sequence + 1
    assert shoot_service.get_shoot(db, gallery.id).banner_image_id is None
    assert [image.id for image in shoot_service.get_shoot_images(db, gallery.id)] == [other.id]

    with pytest.raises(NotFoundError):
        image_service.update_image(db, other.id, ImageUpdate(shoot_id=999))


@pytest.mark.parametrize("field, alias", [("filename", "filename"), ("is_private", "isPrivate"), ("shoot_id", "shootId")])
def test_update_image_refuses_null_for_required_columns(db, make_shoot, make_images, field, alias):
    image = make_images(make_shoot(), 1)[0]

    with pytest.raises(ValidationError) as exc:
        image_service.update_image(db, image.id, ImageUpdate.model_validate({alias: None}))

    assert exc.value.field == alias
    refreshed = image_service.get_image(db, image.id)
    assert refreshed.filename == image.filename
    assert refreshed.is_private is False


def test_download_counter(db, make_shoot, make_images):
    image = make_images(make_shoot(), 1)[0]
    image_service.record_download(db, image.id)
    assert image_service.record_download(db, image.id).download_count == 2
