"""Desktop (pygame) host for SpeedRays."""
