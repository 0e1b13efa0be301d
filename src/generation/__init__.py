"""Generation workflow: request, manifest, orchestrator."""
