"""Tests for spaceships and motherships."""

import random

from spacestation import (
    Coordinates,
    EnvResource,
    GameWarning,
    MotherShip,
    MotherShipDockStatus,
    MotherShipRechargeStatus,
    Quadrant,
    ResourceKind,
    ResourceType,
    SpaceShip,
    SpaceShipDockStatus,
    Storage,
    World,
    WorldSize,
)


def _ship(world: World, level: int = 50, x: int = 0, y: int = 0) -> SpaceShip:
    return SpaceShip(
        name="Zeus",
        coordinates=Coordinates(x=x, y=y, world_size=world.play_area),
        levels=Storage.new(level),
    )


def _resource(world: World, kind: ResourceKind, x: int = 0, y: int = 0) -> EnvResource:
    return EnvResource(
        kind=kind,
        coordinates=Coordinates(x=x, y=y, world_size=world.play_area),
        id=500,
    )


class TestSpaceShipCreation:
    def test_new_levels_in_range(self, world: World):
        rng = random.Random(21)
        for _ in range(20):
            ship = SpaceShip.new("Zeus", world, rng)
            for kind in ResourceType:
                assert 50 <= ship.get_resource_amount(kind) < 100

    def test_new_is_undocked_and_empty(self, world: World, rng):
        ship = SpaceShip.new("Zeus", world, rng)
        assert ship.dock_status == SpaceShipDockStatus.UNDOCKED
        assert ship.storage.is_empty()
        assert ship.coordinates.within_bounds()


class TestShipTransfers:
    def test_give_resources(self, world: World):
        ship = _ship(world, level=30)
        assert ship.give_resources(ResourceType.GAS, 10).ok
        assert ship.get_resource_amount(ResourceType.GAS) == 20

    def test_give_minus_one_remainder(self, world: World):
        ship = _ship(world, level=30)
        assert ship.give_resources(ResourceType.GAS, 31) == GameWarning.RESOURCE_EXHAUSTED
        assert ship.get_resource_amount(ResourceType.GAS) == 30

    def test_receive_from_mothership(self, world: World):
        ship = _ship(world, level=40)
        mothership = MotherShip.new("Ada", world)
        result = ship.receive_resources(ResourceKind.consumables(20), mothership)
        assert result.ok
        assert ship.get_resource_amount(ResourceType.CONSUMABLES) == 60
        assert mothership.get_resource_amount(ResourceType.CONSUMABLES) == 80

    def test_receive_clamps(self, world: World):
        ship = _ship(world, level=95)
        mothership = MotherShip.new("Ada", world)
        ship.receive_resources(ResourceKind.gas(20), mothership)
        assert ship.get_resource_amount(ResourceType.GAS) == 100
        assert mothership.get_resource_amount(ResourceType.GAS) == 80

    def test_receive_between_ships(self, world: World):
        zeus = _ship(world, level=10)
        hera = _ship(world, level=10)
        assert not zeus.receive_resources(ResourceKind.propellant(11), hera).ok
        assert zeus.get_resource_amount(ResourceType.PROPELLANT) == 10
        assert hera.get_resource_amount(ResourceType.PROPELLANT) == 10


class TestMovement:
    def test_move_spends_propellant(self, world: World):
        ship = _ship(world, level=50)
        assert ship.move_to(3, 4) == GameWarning.NOMINAL
        assert ship.coordinates.get_values() == (3, 4)
        assert ship.get_resource_amount(ResourceType.PROPELLANT) == 45
        assert ship.get_resource_amount(ResourceType.CONSUMABLES) == 49
        assert ship.get_resource_amount(ResourceType.GAS) == 49

    def test_consumption_rate_scales_cost(self, world: World):
        ship = _ship(world, level=50)
        assert ship.move_to(6, 8, consumption_rate=2).ok
        assert ship.get_resource_amount(ResourceType.PROPELLANT) == 30

    def test_out_of_bounds(self, world: World):
        ship = _ship(world)
        assert ship.move_to(101, 0) == GameWarning.OUT_OF_BOUNDS
        assert ship.coordinates.get_values() == (0, 0)
        assert ship.get_resource_amount(ResourceType.PROPELLANT) == 50

    def test_destination_checked_against_ship_play_area(self, world: World):
        ship = _ship(world, x=100, y=0)
        destination = Coordinates(x=150, y=0, world_size=WorldSize.new(1000))
        assert ship.to_location(destination) == GameWarning.OUT_OF_BOUNDS
        assert ship.coordinates.get_values() == (100, 0)
        assert ship.get_resource_amount(ResourceType.PROPELLANT) == 50

    def test_destination_takes_ship_play_area(self, world: World):
        ship = _ship(world)
        destination = Coordinates(x=3, y=4, world_size=WorldSize.new(1000))
        assert ship.to_location(destination).ok
        assert ship.coordinates.world_size == world.play_area

    def test_unreachable(self, world: World):
        ship = _ship(world, level=10)
        assert ship.move_to(30, 40) == GameWarning.UNREACHABLE
        assert ship.coordinates.get_values() == (0, 0)
        assert ship.get_resource_amount(ResourceType.PROPELLANT) == 10

    def test_exact_propellant_is_enough(self, world: World):
        ship = _ship(world, level=5)
        assert ship.move_to(3, 4).ok
        assert ship.get_resource_amount(ResourceType.PROPELLANT) == 0

    def test_teleport_is_free(self, world: World):
        ship = _ship(world, level=20, x=-80, y=-80)
        mothership = MotherShip.new("Ada", world)
        ship.teleport(mothership)
        assert ship.coordinates == mothership.coordinates
        assert ship.get_resource_amount(ResourceType.PROPELLANT) == 20


class TestMining:
    def test_mine_into_storage(self, world: World):
        ship = _ship(world)
        resource = _resource(world, ResourceKind.gas(30), x=3, y=4)
        assert ship.mine(resource) == GameWarning.NOMINAL
        assert ship.storage.get_resource_amount(ResourceType.GAS) == 30
        assert resource.is_depleted()

    def test_mine_too_far(self, world: World):
        ship = _ship(world)
        resource = _resource(world, ResourceKind.gas(30), x=6, y=0)
        assert ship.mine(resource) == GameWarning.UNREACHABLE
        assert resource.kind.amount == 30

    def test_mine_depleted(self, world: World):
        ship = _ship(world)
        resource = _resource(world, ResourceKind.gas(0))
        assert ship.mine(resource) == GameWarning.RESOURCE_EXHAUSTED

    def test_mine_with_full_storage(self, world: World):
        ship = _ship(world)
        ship.storage = Storage.new(100)
        resource = _resource(world, ResourceKind.propellant(12))
        assert ship.mine(resource) == GameWarning.SHIP_STORAGE_FULL
        assert resource.kind.amount == 12

    def test_mine_overflow_is_clamped(self, world: World):
        ship = _ship(world)
        ship.storage = Storage.new(90)
        resource = _resource(world, ResourceKind.consumables(40))
        assert ship.mine(resource).ok
        assert ship.storage.get_resource_amount(ResourceType.CONSUMABLES) == 100
        assert resource.is_depleted()


class TestOffload:
    def test_offload_moves_storage(self, world: World):
        ship = _ship(world)
        ship.storage = Storage.new(10)
        mothership = MotherShip.new("Ada", world)
        for kind in ResourceType:
            mothership.levels.counter(kind).amount = 50

        assert ship.offload_storage(mothership).ok
        assert ship.storage.is_empty()
        for kind in ResourceType:
            assert mothership.get_resource_amount(kind) == 60

    def test_offload_into_full_mothership_keeps_storage(self, world: World):
        ship = _ship(world)
        ship.storage = Storage.new(30)
        mothership = MotherShip.new("Ada", world)
        assert ship.offload_storage(mothership) == GameWarning.SHIP_STORAGE_FULL
        assert mothership.get_resource_amount(ResourceType.GAS) == 100
        for kind in ResourceType:
            assert ship.storage.get_resource_amount(kind) == 30

    def test_offload_partial_when_one_counter_full(self, world: World):
        ship = _ship(world)
        ship.storage = Storage.new(30)
        mothership = MotherShip.new("Ada", world)
        mothership.levels.counter(ResourceType.CONSUMABLES).amount = 40
        mothership.levels.counter(ResourceType.PROPELLANT).amount = 90

        assert ship.offload_storage(mothership) == GameWarning.SHIP_STORAGE_FULL
        assert mothership.get_resource_amount(ResourceType.CONSUMABLES) == 70
        assert mothership.get_resource_amount(ResourceType.PROPELLANT) == 100
        assert ship.storage.amounts() == {"consumables": 0, "gas": 30, "propellant": 0}

    def test_offload_empty_storage(self, world: World):
        ship = _ship(world)
        mothership = MotherShip.new("Ada", world)
        assert ship.offload_storage(mothership).ok
        assert mothership.get_resource_amount(ResourceType.GAS) == 100


class TestRecharge:
    def test_dock_and_undock(self, world: World):
        ship = _ship(world)
        mothership = MotherShip.new("Ada", world)
        ship.dock(mothership)
        assert ship.dock_status == SpaceShipDockStatus.DOCKED
        assert mothership.dock == MotherShipDockStatus.POPULATED
        assert mothership.recharge == MotherShipRechargeStatus.CHARGING
        ship.undock(mothership)
        assert ship.dock_status == SpaceShipDockStatus.UNDOCKED
        assert mothership.dock == MotherShipDockStatus.EMPTY
        assert mothership.recharge == MotherShipRechargeStatus.IDLE

    def test_recharge_step(self, world: World):
        ship = _ship(world, level=99)
        ship.recharge_step(5)
        for kind in ResourceType:
            assert ship.get_resource_amount(kind) == 100
        assert ship.is_fully_charged()

    def test_ticks_needed_from_lowest(self, world: World):
        ship = _ship(world, level=90)
        ship.levels.counter(ResourceType.GAS).amount = 70
        assert ship.recharge_ticks_needed() == 30
        assert ship.recharge_ticks_needed(rate=7) == 5

    def test_recharge_to_full(self, world: World):
        ship = _ship(world, level=90)
        ship.levels.counter(ResourceType.PROPELLANT).amount = 80
        mothership = MotherShip.new("Ada", world)
        seen: list[int] = []

        ticks = ship.recharge(
            mothership,
            on_tick=lambda s: seen.append(s.get_resource_amount(ResourceType.PROPELLANT)),
        )

        assert ticks == 20
        assert seen[0] == 81
        assert seen[-1] == 100
        assert ship.is_fully_charged()
        assert ship.dock_status == SpaceShipDockStatus.UNDOCKED
        assert mothership.recharge == MotherShipRechargeStatus.IDLE

    def test_recharge_when_full(self, world: World):
        ship = _ship(world, level=100)
        assert ship.recharge(MotherShip.new("Ada", world)) == 0

    def test_zero_rate_needs_no_ticks(self, world: World):
        ship = _ship(world, level=60)
        assert ship.recharge_ticks_needed(rate=0) == 0
        assert ship.recharge_ticks_needed(rate=-3) == 0

    def test_recharge_with_zero_rate_world(self, rng):
        world = World.new(100, 2, 50, recharge_rate=0, rng=rng)
        ship = _ship(world, level=60)
        mothership = MotherShip.new("Ada", world)
        assert ship.recharge(mothership, world.recharge_rate) == 0
        assert ship.get_resource_amount(ResourceType.GAS) == 60
        assert ship.dock_status == SpaceShipDockStatus.UNDOCKED


class TestStatus:
    def test_ship_status(self, world: World):
        ship = _ship(world, level=42, x=-3, y=7)
        ship.storage = Storage.new(4)
        status = ship.status()
        assert status.name == "Zeus"
        assert status.consumables == 42
        assert status.gas == 42
        assert status.propellant == 42
        assert (status.x, status.y) == (-3, 7)
        assert status.quadrant == Quadrant.SECOND
        assert status.dock_status == "undocked"
        assert isinstance(status.dock_status, SpaceShipDockStatus)
        assert status.storage == {"consumables": 4, "gas": 4, "propellant": 4}

    def test_mothership_starts_full_at_center(self, world: World):
        mothership = MotherShip.new("Ada", world)
        status = mothership.status()
        assert (status.consumables, status.gas, status.propellant) == (100, 100, 100)
        assert (status.x, status.y) == (0, 0)
        assert status.quadrant == Quadrant.FOURTH
        assert status.dock_status == "empty"
        assert isinstance(status.dock_status, MotherShipDockStatus)
