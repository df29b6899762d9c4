"""Support code shared by the CLI: configuration, ACL signing, admin client seam."""
