"""Synthesis pipeline: oscillator, envelope, tone renderer, mixer, WAV encoder."""
