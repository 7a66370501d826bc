"""
Sample documents served by the static content source.

SIX_TAB_FIXTURE covers every body variant once editable and once read-only.
"""

TEXT_FIXTURE = {"text": "LOREM IPSUM"}

SIX_TAB_FIXTURE = {
    "string": {"editable": False, "body": "LOREM IPSUM"},
    "string-editable": {"editable": True, "body": "LOREM IPSUM DOLOR"},
    "list": {"editable": False, "body": ["LOREM", "IPSUM"]},
    "list-editable": {"editable": True, "body": ["DOLOR", "SIT", "AMET"]},
    "object": {"editable": False, "body": {"text": "LOREM IPSUM"}},
    "object-editable": {"editable": True, "body": {"text": "CONSECTETUR"}},
}
