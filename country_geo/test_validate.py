#!/usr/bin/env python3
"""
Tests for validate.py
"""

from country_geo.validate import summarize

TRIANGLE = [[0, 0], [1, 0], [1, 1], [0, 0]]
BOWTIE = [[0, 0], [1, 1], [1, 0], [0, 1], [0, 0]]
OFFSET_TRIANGLE = [[5, 5], [6, 5], [6, 6], [5, 5]]


def test_summarize_counts():
    countries = {
        'NO': {'country_name': 'Norway', 'geometry': [[TRIANGLE], [OFFSET_TRIANGLE]]},
        'SE': {'country_name': 'Sweden', 'geometry': [[TRIANGLE]]},
    }

    summary = summarize(countries)

    assert summary['countries'] == 2
    assert summary['polygons'] == 3
    assert summary['rings'] == 3
    assert summary['invalid'] == []


def test_summarize_flags_invalid_geometry():
    countries = {
        'OK': {'country_name': 'Fine', 'geometry': [[TRIANGLE]]},
        'BT': {'country_name': 'Bowtie', 'geometry': [[BOWTIE]]},
    }

    summary = summarize(countries)

    assert summary['invalid'] == ['BT']


def test_summarize_does_not_modify_lookup():
    countries = {'NO': {'country_name': 'Norway', 'geometry': [[TRIANGLE]]}}

    summarize(countries)

    assert countries == {'NO': {'country_name': 'Norway', 'geometry': [[TRIANGLE]]}}


def test_summarize_empty():
    assert summarize({}) == {'countries': 0, 'polygons': 0, 'rings': 0, 'invalid': []}


def test_summarize_passed_through_non_polygon():
    """Point/LineString coordinates kept in lenient mode are reported, not counted."""
    countries = {
        'PT': {'country_name': 'Point Island', 'geometry': [0, 0]},
        'LN': {'country_name': 'Line Land', 'geometry': [[0, 0], [1, 1]]},
        'OK': {'country_name': 'Fine', 'geometry': [[TRIANGLE]]},
    }

    summary = summarize(countries)

    assert summary['invalid'] == ['PT', 'LN']
    assert summary['countries'] == 3
    assert summary['polygons'] == 1
    assert summary['rings'] == 1
