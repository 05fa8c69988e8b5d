# ==============================================
# Tests for SettingsGuesser and guess()
# ==============================================

import pytest

from settings_guessr import (
    EmptyInput,
    FinalSettings,
    InvalidDocument,
    SettingsGuesser,
    guess,
)


class TestGuess:

    def test_array_buffer(self, config):
        settings = guess(b'[{"price": 10}, {"price": 20}, {"price": 5}]', config)

        assert isinstance(settings, FinalSettings)
        assert settings.filterable_attributes == ["price"]
        assert settings.sortable_attributes == ["price"]

    def test_stream_buffer(self, config):
        settings = guess('{"id": "1"}{"id": "2"}{"id": "3"}', config)

        assert settings.filterable_attributes == ["id"]
        assert settings.searchable_attributes == []

    def test_empty_buffer(self, config):
        with pytest.raises(EmptyInput):
            guess(b"", config)

    def test_invalid_document_aborts(self, config):
        with pytest.raises(InvalidDocument):
            guess(b'[{"price": 10}, "oops"]', config)

    def test_round_trip_through_dict(self, config, sample_documents):
        guesser = SettingsGuesser(config)
        guesser.ingest_batch(sample_documents)
        settings = guesser.finish()

        assert FinalSettings.from_dict(settings.to_dict()) == settings


class TestSettingsGuesser:

    def test_status(self, config, sample_documents):
        guesser = SettingsGuesser(config)
        for document in sample_documents:
            guesser.ingest(document)

        status = guesser.get_status()
        assert status["documents_ingested"] == 3
        assert status["fields_discovered"] == 8
        assert not status["finished"]

        guesser.finish()
        assert guesser.get_status()["finished"]
        assert guesser.get_status()["fields_scored"] == 8

    def test_ingest_buffer_counts_documents(self, config):
        guesser = SettingsGuesser(config)
        assert guesser.ingest_buffer('{"a": 1} {"a": 2}') == 2
        assert guesser.ingest_buffer('[{"a": 3}]') == 1

    def test_field_scores(self, config):
        guesser = SettingsGuesser(config)
        assert guesser.get_field_scores() == {}

        guesser.ingest({"price": 10})
        guesser.finish()

        assert guesser.get_field_scores()["price"].total == 1

    def test_searchable_order_override(self, config):
        guesser = SettingsGuesser(config, searchable_order="sorted")
        guesser.ingest({"title": "hello", "name": "world"})

        assert guesser.finish().searchable_attributes == ["name", "title"]

    @pytest.mark.parametrize("buffer", [
        '[{"price": 1}, {"price": 2}, 3]',
        '{"price": 1} {"price": 2} {"price": ',
    ])
    def test_failed_buffer_leaves_guesser_untouched(self, config, buffer):
        guesser = SettingsGuesser(config)

        with pytest.raises(InvalidDocument):
            guesser.ingest_buffer(buffer)

        status = guesser.get_status()
        assert status["documents_ingested"] == 0
        assert status["fields_discovered"] == 0

        guesser.ingest_buffer('[{"title": "hello"}]')
        settings = guesser.finish()
        assert settings.filterable_attributes == ["title"]
        assert settings.sortable_attributes == []

    def test_deeply_nested_document(self, config):
        settings = guess('{"a": ' * 600 + "1" + "}" * 600, config)

        path = ".".join(["a"] * 600)
        assert settings.filterable_attributes == [path]
        assert settings.sortable_attributes == [path]
