REPOS_DIR = "_repos"
"""Directory under the root dir that holds every cached repo"""

LOCK_SUFFIX = ".lock"
"""Suffix of the lease lock file that sits next to a git dir"""

PARTIAL_SUFFIX = ".partial"
"""Suffix of the staging directory a clone is written to before it is moved into place"""

REPO_MARKER = "config"
"""File whose presence marks a git dir as complete"""
