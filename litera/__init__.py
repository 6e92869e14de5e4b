"""
Litera - Learning Game Session Sync Engine

Client-side session manager for an integrated learning game with three modules
(prebunking, ethical dilemmas, professional communication). The engine:
- Holds the learner's session identifier
- Submits learner decisions to a remote scoring service
- Mirrors the authoritative progress state returned by that service
- Keeps the last good state when the network or the service fails
"""

__version__ = "0.1.0"
