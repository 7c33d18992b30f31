"""
Unit tests for the profile configuration record.
"""

import pytest
from pydantic import ValidationError

from gh_profile_gen.config.profile import (
    Article,
    Blog,
    HeaderStyle,
    ProfileConfig,
    Stats,
    Template,
)


class TestProfileConfig:
    """Tests for the ProfileConfig schema."""

    def test_default_is_empty(self):
        config = ProfileConfig()
        assert config.meta.username == ""
        assert config.about is None
        assert config.to_dict() == {"meta": {"username": ""}}

    def test_enums_serialize_as_snake_case(self):
        config = ProfileConfig.model_validate(
            {"header": {"style": "typing_svg"}, "layout": {"template": "developer_card"}}
        )
        assert config.header.style is HeaderStyle.TYPING_SVG
        assert config.layout.template is Template.DEVELOPER_CARD
        data = config.to_dict()
        assert data["header"] == {"style": "typing_svg"}
        assert data["layout"] == {"template": "developer_card"}

    def test_to_dict_omits_unset(self, sample_profile):
        data = sample_profile.to_dict()
        assert data["about"] == {"role": "Engineer", "pronouns": "they/them"}
        assert "social" not in data

    def test_nested_lists(self):
        blog = Blog(articles=[Article(title="Hi", url="https://x.dev")])
        config = ProfileConfig(blog=blog)
        assert config.to_dict()["blog"] == {"articles": [{"title": "Hi", "url": "https://x.dev"}]}

    def test_top_langs_count_is_unbounded(self):
        stats = Stats.model_validate({"top_langs_count": 30})
        assert stats.top_langs_count == 30

    def test_assignment_is_validated(self):
        config = ProfileConfig()
        with pytest.raises(ValidationError):
            config.layout = "not a layout"
