"""
Unit tests for scanner module functions.
"""

import os

import numpy as np
import pytest
from PIL import Image

from imgsim.exceptions import DecodeFailure, InvalidParameter
from imgsim.models import SimilarityConfig
from imgsim.scanner import (
    iter_candidate_files,
    has_allowed_extension,
    find_image_files,
    decode_image,
    fingerprint_file,
    build_corpus,
)
from imgsim.similarity import rank_self


class TestIterCandidateFiles:
    """Test iter_candidate_files function."""

    def test_yields_all_files(self, sample_images, temp_dir):
        files = list(iter_candidate_files(temp_dir))
        assert sorted(files) == sorted(sample_images.values())

    def test_sorted_and_repeatable(self, sample_images, temp_dir):
        first = list(iter_candidate_files(temp_dir))
        assert first == sorted(first)
        assert list(iter_candidate_files(temp_dir)) == first

    def test_recursive(self, temp_dir):
        subdir = temp_dir / "subdir"
        subdir.mkdir()
        Image.new('L', (10, 10)).save(subdir / "nested.png")

        files = list(iter_candidate_files(temp_dir))
        assert os.path.join(str(temp_dir), "subdir", "nested.png") in files

    def test_directories_not_yielded(self, temp_dir):
        (temp_dir / "folder.png").mkdir()
        assert list(iter_candidate_files(temp_dir)) == []

    def test_missing_root_yields_nothing(self, temp_dir):
        assert list(iter_candidate_files(temp_dir / "missing")) == []

    def test_is_lazy(self, temp_dir):
        iterator = iter_candidate_files(temp_dir)
        assert iter(iterator) is iterator


class TestHasAllowedExtension:
    """Test has_allowed_extension function."""

    def test_match(self):
        assert has_allowed_extension("/photos/cat.png", {"png"})

    def test_case_sensitive(self):
        assert not has_allowed_extension("/photos/cat.PNG", {"png"})

    def test_only_final_suffix(self):
        assert has_allowed_extension("/photos/archive.tar.png", {"png"})
        assert not has_allowed_extension("/photos/cat.png.txt", {"png"})

    def test_no_extension(self):
        assert not has_allowed_extension("/photos/README", {"png"})


class TestFindImageFiles:
    """Test find_image_files function."""

    def test_default_extensions(self, sample_images):
        files = find_image_files(os.path.dirname(sample_images['pattern']))
        names = sorted(os.path.basename(f) for f in files)
        assert names == [
            "broken.png", "gradient.jpg", "inverse.png",
            "pattern.png", "pattern_copy.png", "pattern_large.png",
        ]

    def test_custom_extensions(self, sample_images, temp_dir):
        files = find_image_files(temp_dir, {"PNG", "txt"})
        assert sorted(files) == sorted([sample_images['upper'], sample_images['notes']])

    def test_empty_directory(self, temp_dir):
        assert find_image_files(temp_dir) == []


class TestDecodeImage:
    """Test decode_image function."""

    def test_grayscale_is_two_dimensional(self, sample_images):
        pixels = decode_image(sample_images['gradient'])
        assert pixels.shape == (60, 80)
        assert pixels.dtype == np.uint8

    def test_color_modes(self, temp_dir):
        Image.new('RGBA', (10, 12), (255, 0, 0, 128)).save(temp_dir / "rgba.png")
        Image.new('RGB', (10, 12), (0, 255, 0)).save(temp_dir / "rgb.png")
        Image.new('P', (10, 12)).save(temp_dir / "palette.png")

        assert decode_image(temp_dir / "rgba.png", grayscale=False).shape == (12, 10, 4)
        assert decode_image(temp_dir / "rgb.png", grayscale=False).shape == (12, 10, 3)
        assert decode_image(temp_dir / "palette.png", grayscale=False).shape == (12, 10, 3)

    def test_not_an_image(self, sample_images):
        with pytest.raises(DecodeFailure) as exc_info:
            decode_image(sample_images['broken'])
        assert exc_info.value.path == sample_images['broken']

    def test_missing_file(self, temp_dir):
        with pytest.raises(DecodeFailure) as exc_info:
            decode_image(temp_dir / "missing.png")
        assert exc_info.value.reason == "File not found"

    def test_directory(self, temp_dir):
        with pytest.raises(DecodeFailure):
            decode_image(temp_dir)


class TestFingerprintFile:
    """Test fingerprint_file function."""

    def test_identical_files_same_fingerprint(self, sample_images):
        config = SimilarityConfig()
        first = fingerprint_file(sample_images['pattern'], config)
        second = fingerprint_file(sample_images['pattern_copy'], config)
        assert first == second
        assert len(first) == 256

    def test_config_parameters_used(self, sample_images):
        config = SimilarityConfig(resize_length=32, dct_block=8)
        assert len(fingerprint_file(sample_images['pattern'], config)) == 64


class TestBuildCorpus:
    """Test build_corpus function."""

    def test_skips_undecodable_files(self, sample_images, temp_dir):
        corpus = build_corpus(temp_dir)
        identifiers = [entry.identifier for entry in corpus]

        assert sample_images['broken'] not in identifiers
        assert sample_images['upper'] not in identifiers
        assert len(corpus) == 5
        assert all(len(entry.fingerprint) == 256 for entry in corpus)

    def test_walk_order_regardless_of_workers(self, sample_images, temp_dir):
        single = build_corpus(temp_dir, max_workers=1)
        parallel = build_corpus(temp_dir, max_workers=8)
        assert single == parallel
        assert [e.identifier for e in single] == sorted(e.identifier for e in single)

    def test_empty_directory(self, temp_dir):
        assert build_corpus(temp_dir) == []

    def test_one_valid_one_broken_gives_singleton(self, temp_dir):
        Image.new('L', (20, 20), 200).save(temp_dir / "good.png")
        (temp_dir / "bad.png").write_bytes(b"\x89PNG garbage")

        corpus = build_corpus(temp_dir)
        assert len(corpus) == 1

        good = str(temp_dir / "good.png")
        assert [tuple(pair) for pair in rank_self(corpus)] == [(1.0, good, good)]

    def test_invalid_config_raises(self, sample_images, temp_dir):
        with pytest.raises(InvalidParameter):
            build_corpus(temp_dir, SimilarityConfig(resize_length=8, dct_block=16))

    def test_extension_filter(self, sample_images, temp_dir):
        config = SimilarityConfig().with_extensions({"jpg"})
        corpus = build_corpus(temp_dir, config)
        assert [entry.identifier for entry in corpus] == [sample_images['gradient']]

    def test_progress_callback_reaches_total(self, sample_images, temp_dir):
        calls = []
        build_corpus(temp_dir, progress_callback=lambda current, total: calls.append((current, total)))
        assert calls[-1] == (6, 6)
