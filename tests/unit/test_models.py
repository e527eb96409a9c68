import pandas as pd

from wistia_kit import AssetKind, Media, Visitor, decode, to_dataframe


def load_media(load_fixture):
    return decode(load_fixture("media.json"), Media).unwrap()


def test_assets_matching_enum(load_fixture):
    media = load_media(load_fixture)
    hd = media.assets_matching(AssetKind.HD_MP4)
    assert [a.type for a in hd] == [AssetKind.HD_MP4]


def test_assets_matching_raw_token_ignores_case(load_fixture):
    media = load_media(load_fixture)
    assert [a.width for a in media.assets_matching("hdmp4videofile")] == [1280]
    assert media.assets_matching("HDMP4VIDEOFILE") == media.assets_matching(AssetKind.HD_MP4)


def test_assets_matching_raw_token_is_exact(load_fixture):
    media = load_media(load_fixture)
    # "Mp4VideoFile" is a suffix of the HD and MD tokens but names its own kind
    assert media.assets_matching("Mp4VideoFile") == ()
    assert media.assets_matching("Mp4") == ()


def test_urls_and_admin_link(load_fixture):
    media = load_media(load_fixture)
    assert media.urls_of_kind(AssetKind.ORIGINAL) == (
        "http://embed.wistia.com/deliveries/856970d8b8b8a2b37a2b3c4f7d6f2ee6cd8bd9d5.bin",
    )
    assert media.admin_url("acme") == "https://acme.wistia.com/medias/abcd123"


def test_to_dataframe_flattens(load_fixture):
    visitors = decode(load_fixture("visitors.json"), tuple[Visitor, ...]).unwrap()

    df = to_dataframe(visitors)

    assert len(df) == 2
    assert "visitor_identity.email" in df.columns
    assert df.loc[0, "visitor_identity.email"] == "ada@example.com"
    assert pd.api.types.is_integer_dtype(df["load_count"])
    assert pd.api.types.is_datetime64_any_dtype(df["created_at"])


def test_to_dataframe_empty():
    assert to_dataframe([]).empty
