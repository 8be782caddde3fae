from datetime import datetime

import pytest

from tripadmin.models import CheckpointImage, Comment
from tripadmin.models.mixins import should_flag


@pytest.mark.parametrize(
    "result, flagged",
    [
        (None, False),
        ({}, False),
        ({"adult": {"confidence": 0.7}}, False),
        ({"adult": {"confidence": 0.71}}, True),
        ({"violence": {"confidence": 0.95}}, True),
        ({"racy": {"confidence": 0.99}}, False),
        ({"adult": {"confidence": None}}, False),
        ({"adult": None, "violence": {"confidence": 0.8}}, True),
    ],
)
def test_flag_threshold(result, flagged):
    assert should_flag(result) is flagged


def test_add_image_appends_and_flags():
    comment = Comment(content="Look at this", images=None, is_flagged=False)

    comment.add_image("comments/1.jpg", {"adult": {"confidence": 0.1}})
    assert comment.images == ["comments/1.jpg"]
    assert comment.is_flagged is False

    comment.add_image("comments/2.jpg", {"violence": {"confidence": 0.8}})
    assert comment.images == ["comments/1.jpg", "comments/2.jpg"]
    assert comment.is_flagged is True


def test_flag_is_sticky():
    image = CheckpointImage(file_path="checkpoints/1.jpg", uploaded_at=datetime(2026, 4, 2), is_flagged=False)

    image.apply_moderation({"adult": {"confidence": 0.9}})
    image.apply_moderation({"adult": {"confidence": 0.1}})

    assert image.is_flagged is True
    assert image.moderation_results == {"adult": {"confidence": 0.1}}


def test_partial_moderation_result_does_not_flag():
    image = CheckpointImage(file_path="checkpoints/2.jpg", uploaded_at=datetime(2026, 4, 3), is_flagged=False)

    image.apply_moderation({"adult": {"confidence": None}, "violence": {}})

    assert image.is_flagged is False
