"""
Unit tests for license and copyright detection.
"""

import pytest

from pomgraph.licenses import (
    NOASSERTION,
    build_license_concluded,
    build_license_declared,
    detect_license,
    get_copyright,
    identify_license,
)

MIT_TEXT = """MIT License

Copyright (c) 2024 Jane Doe

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction.
"""

APACHE_HEADER = """
                                 Apache License
                           Version 2.0, January 2004
                        http://www.apache.org/licenses/
"""

LGPL_HEADER = """                  GNU LESSER GENERAL PUBLIC LICENSE
                       Version 2.1, February 1999
"""

GPL3_HEADER = """                    GNU GENERAL PUBLIC LICENSE
                       Version 3, 29 June 2007
"""


class TestIdentifyLicense:
    """Tests for identify_license."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            (MIT_TEXT, "MIT"),
            (APACHE_HEADER, "Apache-2.0"),
            (LGPL_HEADER, "LGPL-2.1"),
            (GPL3_HEADER, "GPL-3.0"),
            ("The Apache Software License, Version 2.0", "Apache-2.0"),
            ("Eclipse Public License - v 2.0", "EPL-2.0"),
            ("Mozilla Public License Version 2.0", "MPL-2.0"),
            ("The MIT License", "MIT"),
        ],
    )
    def test_known(self, text, expected):
        assert identify_license(text) == expected

    def test_unknown(self):
        assert identify_license("Proprietary, all rights reserved") is None
        assert identify_license("") is None
        assert identify_license(None) is None


class TestDetectLicense:
    """Tests for detect_license."""

    def test_license_file(self, tmp_path):
        (tmp_path / "LICENSE").write_text(MIT_TEXT)
        info = detect_license(tmp_path)
        assert info.id == "MIT"
        assert info.extracted_text == MIT_TEXT
        assert info.comments == "Detected from LICENSE"

    def test_declared_name_fallback(self, tmp_path):
        info = detect_license(tmp_path, ["The Apache Software License, Version 2.0"])
        assert info.id == "Apache-2.0"
        assert info.extracted_text == ""

    def test_file_wins_over_declared_name(self, tmp_path):
        (tmp_path / "LICENSE.txt").write_text(MIT_TEXT)
        info = detect_license(tmp_path, ["Apache License, Version 2.0"])
        assert info.id == "MIT"

    def test_nothing_found(self, tmp_path):
        assert detect_license(tmp_path) is None


class TestLicenseFields:
    """Tests for declared/concluded/copyright helpers."""

    def test_declared_and_concluded(self):
        assert build_license_declared("MIT") == "MIT"
        assert build_license_concluded("MIT") == "MIT"
        assert build_license_declared("") == NOASSERTION
        assert build_license_concluded(None) == NOASSERTION

    def test_copyright(self):
        assert get_copyright(MIT_TEXT) == "Copyright (c) 2024 Jane Doe"
        assert get_copyright("Copyright 2019-2024 The Authors\n") == (
            "Copyright 2019-2024 The Authors"
        )

    def test_copyright_missing(self):
        assert get_copyright("the copyright owner grants") == NOASSERTION
        assert get_copyright("") == NOASSERTION
