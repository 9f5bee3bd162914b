"""A headless space shooter: entities, collisions, ship controls, asteroids and game states."""