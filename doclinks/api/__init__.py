"""API layer: domain logic exposed as cmd_* functions returning StageResult."""
