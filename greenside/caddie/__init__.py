from .playslike import plays_like_distance, wind_summary

__all__ = ["plays_like_distance", "wind_summary"]
