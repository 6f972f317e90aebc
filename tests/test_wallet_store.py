import pytest
from pydantic import ValidationError

from rewards_client import RewardsWallet, WalletStore

from .conftest import PAYMENT_ID, RECOVERY_SEED


class TestRewardsWallet:
    def test_seed_from_base64(self):
        wallet = RewardsWallet(payment_id=PAYMENT_ID, recovery_seed="AAECAw==")
        assert wallet.recovery_seed == b"\x00\x01\x02\x03"

    def test_bad_base64(self):
        with pytest.raises(ValidationError):
            RewardsWallet(payment_id=PAYMENT_ID, recovery_seed="not base64!")

    def test_repr_hides_seed(self, wallet):
        assert repr(wallet) == "RewardsWallet(payment_id='abc123')"

    def test_frozen(self, wallet):
        with pytest.raises(ValidationError):
            wallet.payment_id = "other"


class TestWalletStore:
    def test_set_get_clear(self, wallet):
        store = WalletStore()
        assert store.get_wallet() is None

        store.set_wallet(wallet)
        assert store.get_wallet() == wallet

        store.clear()
        assert store.get_wallet() is None

    def test_from_file(self, wallet_json):
        wallet = WalletStore.from_file(wallet_json).get_wallet()
        assert wallet.payment_id == PAYMENT_ID
        assert wallet.recovery_seed == RECOVERY_SEED

    def test_missing_file(self, tmp_path):
        assert WalletStore.from_file(tmp_path / "nope.json").get_wallet() is None

    @pytest.mark.parametrize("content", ["{not json", '{"payment_id": "x"}', '{"payment_id": "x", "recovery_seed": "%%%"}'])
    def test_malformed_file(self, tmp_path, content):
        path = tmp_path / "wallet.json"
        path.write_text(content)
        assert WalletStore.from_file(path).get_wallet() is None

    def test_from_env(self, monkeypatch, wallet_json):
        monkeypatch.setenv("REWARDS_WALLET_JSON", str(wallet_json))
        assert WalletStore.from_env().get_wallet().payment_id == PAYMENT_ID

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("REWARDS_WALLET_JSON", raising=False)
        assert WalletStore.from_env().get_wallet() is None
