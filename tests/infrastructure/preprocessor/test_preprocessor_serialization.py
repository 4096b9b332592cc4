from __future__ import annotations

import json
import unittest

from shapebridge.infrastructure.preprocessor import (
    Cnn3DToFeedForwardPreProcessor,
    CnnToFeedForwardPreProcessor,
    FeedForwardToCnn3DPreProcessor,
    preprocessor_from_config,
    preprocessor_from_json,
    preprocessor_to_config,
    preprocessor_to_json,
    registered_preprocessors,
)


class TestPreprocessorConfig(unittest.TestCase):
    def test_cnn3d_get_config_uses_record_field_names(self) -> None:
        pp = Cnn3DToFeedForwardPreProcessor(2, 3, 3, 4, False)
        self.assertEqual(
            pp.get_config(),
            {
                "inputDepth": 2,
                "inputHeight": 3,
                "inputWidth": 3,
                "numChannels": 4,
                "isNCDHW": False,
            },
        )

    def test_from_config_defaults_optional_fields(self) -> None:
        pp = Cnn3DToFeedForwardPreProcessor.from_config(
            {"inputDepth": 2, "inputHeight": 3, "inputWidth": 3}
        )
        self.assertEqual(pp, Cnn3DToFeedForwardPreProcessor(2, 3, 3, 1, True))

    def test_from_config_missing_required_key_raises(self) -> None:
        with self.assertRaises(KeyError):
            Cnn3DToFeedForwardPreProcessor.from_config(
                {"inputHeight": 3, "inputWidth": 3, "numChannels": 4}
            )

    def test_from_config_invalid_value_raises(self) -> None:
        with self.assertRaises(ValueError):
            Cnn3DToFeedForwardPreProcessor.from_config(
                {"inputDepth": 0, "inputHeight": 3, "inputWidth": 3}
            )

    def test_to_config_node_format(self) -> None:
        node = preprocessor_to_config(Cnn3DToFeedForwardPreProcessor(2, 3, 3, 4))
        self.assertEqual(node["type"], "Cnn3DToFeedForwardPreProcessor")
        self.assertEqual(node["config"]["numChannels"], 4)
        self.assertTrue(node["config"]["isNCDHW"])

    def test_json_round_trip_all_registered(self) -> None:
        cases = [
            Cnn3DToFeedForwardPreProcessor(2, 3, 3, 4, True),
            Cnn3DToFeedForwardPreProcessor(5, 6, 7, 8, False),
            FeedForwardToCnn3DPreProcessor(2, 3, 3, 4, False),
            CnnToFeedForwardPreProcessor(28, 28, 3),
        ]
        for pp in cases:
            with self.subTest(preprocessor=pp):
                text = preprocessor_to_json(pp)
                payload = json.loads(text)
                self.assertEqual(payload["type"], type(pp).__name__)

                loaded = preprocessor_from_json(text)
                self.assertEqual(loaded, pp)
                self.assertIs(type(loaded), type(pp))

    def test_registry_contains_builtin_preprocessors(self) -> None:
        names = registered_preprocessors()
        for cls in (
            Cnn3DToFeedForwardPreProcessor,
            FeedForwardToCnn3DPreProcessor,
            CnnToFeedForwardPreProcessor,
        ):
            self.assertIs(names[cls.__name__], cls)

    def test_unknown_type_raises(self) -> None:
        with self.assertRaises(ValueError):
            preprocessor_from_config({"type": "RnnToCnnPreProcessor", "config": {}})


if __name__ == "__main__":
    unittest.main()
