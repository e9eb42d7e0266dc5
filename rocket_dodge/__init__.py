"""Rocket Dodge: steer a rocket around falling asteroids."""
