"""Site URL helpers."""

from sfcli.site.github_pages import derive_site_root, owner_from_site_root

__all__ = ["derive_site_root", "owner_from_site_root"]
