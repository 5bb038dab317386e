from runtime_tracks.ids import create_track_id, extract_group_id


def test_create_track_id():
    assert create_track_id(42, 3) == "42-3"


def test_extract_group_id():
    assert extract_group_id("42-3") == 42
    assert extract_group_id(create_track_id(1234, 0)) == 1234


def test_extract_group_id_without_match():
    assert extract_group_id("bogus") == -1
    assert extract_group_id("42") == -1
    assert extract_group_id("-3") == -1
