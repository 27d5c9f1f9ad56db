"""SocialHub: social network backend with realtime messaging and notifications."""

__version__ = "1.0.0"
