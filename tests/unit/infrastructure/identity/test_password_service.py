"""Tests for argon2 password hashing."""

from flashdeck.infrastructure.identity.services.password_service import PasswordService


def test_hash_and_verify() -> None:
    service = PasswordService()
    hashed = service.hash_password("correct-horse")

    assert hashed != "correct-horse"
    assert service.verify_password("correct-horse", hashed)
    assert not service.verify_password("wrong-horse", hashed)


def test_pepper_is_part_of_the_hash() -> None:
    peppered = PasswordService(pepper="pepper-one")
    hashed = peppered.hash_password("correct-horse")

    assert peppered.verify_password("correct-horse", hashed)
    assert not PasswordService(pepper="pepper-two").verify_password("correct-horse", hashed)
    assert not PasswordService().verify_password("correct-horse", hashed)


def test_unknown_hash_format_does_not_verify() -> None:
    assert not PasswordService().verify_password("anything", "not-a-real-hash")


def test_dummy_hash_is_real_and_stable() -> None:
    service = PasswordService()
    dummy = service.get_dummy_hash()

    assert dummy.startswith("$argon2")
    assert service.get_dummy_hash() == dummy
    assert not service.verify_password("correct-horse", dummy)
