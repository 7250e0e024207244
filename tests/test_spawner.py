"""Tests for timed enemy and power-up spawning."""
from tank_game.entities import PowerUpKind
from tank_game.spawner import spawn_enemy, spawn_logic, spawn_power_up


class TestSpawnEnemy:

    def test_level_one_stats(self, world):
        for _ in range(50):
            enemy = spawn_enemy(world)
            assert enemy.health == 50
            assert enemy.max_health == 50
            assert 1.0 <= enemy.speed <= 3.0
            assert enemy.shoot_cooldown == 2000

    def test_level_five_stats(self, world):
        world.level = 5
        enemy = spawn_enemy(world)
        assert enemy.health == 90
        assert enemy.shoot_cooldown == 1600
        assert enemy.speed <= 3.0

    def test_speed_cap_holds_at_high_level(self, world):
        world.level = 40
        for _ in range(20):
            assert spawn_enemy(world).speed == 3.0

    def test_spawns_just_outside_one_edge(self, world):
        cfg = world.config
        margin = cfg.enemy_size / 2
        sides = set()
        for _ in range(200):
            e = spawn_enemy(world)
            if e.y == -margin:
                sides.add("top")
                assert 0 <= e.x <= cfg.width
            elif e.x == cfg.width + margin:
                sides.add("right")
                assert 0 <= e.y <= cfg.height
            elif e.y == cfg.height + margin:
                sides.add("bottom")
                assert 0 <= e.x <= cfg.width
            else:
                assert e.x == -margin
                assert 0 <= e.y <= cfg.height
                sides.add("left")
        assert sides == {"top", "right", "bottom", "left"}

    def test_last_shot_starts_at_spawn_time(self, world):
        world.now = 1234.0
        assert spawn_enemy(world).last_shot == 1234.0


class TestSpawnPowerUp:

    def test_in_bounds_with_margin(self, world):
        cfg = world.config
        kinds = set()
        for _ in range(200):
            p = spawn_power_up(world)
            assert cfg.power_up_margin <= p.x <= cfg.width - cfg.power_up_margin
            assert cfg.power_up_margin <= p.y <= cfg.height - cfg.power_up_margin
            kinds.add(p.kind)
        assert kinds == set(PowerUpKind)


class TestSpawnLogic:

    def test_enemy_waits_for_interval(self, world):
        world.now = 2000.0
        spawn_logic(world)
        assert len(world.enemies) == 0

        world.now = 2001.0
        spawn_logic(world)
        assert len(world.enemies) == 1
        assert world.last_enemy_spawn == 2001.0

        world.now = 2500.0
        spawn_logic(world)
        assert len(world.enemies) == 1

    def test_interval_follows_level(self, world):
        world.spawn_interval = 500.0
        world.now = 501.0
        spawn_logic(world)
        assert len(world.enemies) == 1

    def test_power_up_on_fixed_interval(self, world):
        world.now = 10001.0
        spawn_logic(world)
        assert len(world.power_ups) == 1
        assert world.last_power_up_spawn == 10001.0

    def test_max_enemies_cap(self, session, world):
        world.config = world.config.with_overrides(max_enemies=1)
        world.now = 2001.0
        spawn_logic(world)
        world.now = 4002.0
        spawn_logic(world)
        assert len(world.enemies) == 1
        # the timer still resets while capped
        assert world.last_enemy_spawn == 4002.0
