"""Physical-presence eligibility engine for residency status changes."""
