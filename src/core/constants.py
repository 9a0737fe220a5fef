# -*- coding: utf-8 -*-
"""Registry endpoints, upstream release assets, and game directory layout."""
from pathlib import PurePosixPath


# Environment & defaults
MOD_IDS_ENV = "MOD_IDS"
DEFAULT_GAME_ROOT = "/config/gamefiles"

# Game layout, relative to the game root
MODS_SUBDIR = PurePosixPath("FactoryGame/Mods")
BINARIES_SUBDIR = PurePosixPath("FactoryGame/Binaries/Win64")
LOADER_DIR_NAME = "SML"

# Registry
REGISTRY_BASE_URL = "https://api.ficsit.app/v1"
MOD_INFO_URL = REGISTRY_BASE_URL + "/mod/{mod_id}"
MOD_DOWNLOAD_URL = REGISTRY_BASE_URL + "/mod/{mod_id}/versions/{version}/download"

# Upstream release assets
RELEASE_ASSET_URL = "https://github.com/{owner}/{repo}/releases/latest/download/{file_name}"
UPSTREAM_OWNER = "satisfactorymodding"
BOOTSTRAPPER_REPO = "SatisfactoryModBootstrapper"
BOOTSTRAPPER_FILES = ("msdia140.dll", "xinput1_3.dll")
LOADER_REPO = "SatisfactoryModLoader"
LOADER_ARCHIVE = "SML.zip"

# Network & file writes
REQUEST_TIMEOUT = None  # block on OS defaults
CHUNK_SIZE = 8192
INSTALLED_FILE_MODE = 0o755
