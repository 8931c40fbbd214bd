import logging
import os
import tempfile
import unittest
from unittest.mock import Mock, patch

from consts import ANNOTATION_SHOOT_USE_AS_SEED
from errors import IdentifierParseError, StoreConfigError
from models import KubeconfigStore
from store import GardenerStore
from fixtures import KUBECONFIG, make_project, make_secret, make_shoot


class TestGardenerStore(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger(__name__)
        self.mock_v1 = Mock()
        self.mock_custom_objects_api = Mock()
        self.store = KubeconfigStore(
            kind='gardener',
            config={'gardenerAPIKubeconfigPath': '/kube/garden.yaml', 'landscapeName': 'dev'},
        )

    def new_store(self, store=None) -> GardenerStore:
        return GardenerStore(
            logger=self.logger,
            store=store or self.store,
            v1=self.mock_v1,
            custom_objects_api=self.mock_custom_objects_api,
        )

    def test_missing_config(self):
        with self.assertRaises(StoreConfigError):
            self.new_store(KubeconfigStore(kind='gardener'))

    def test_builds_garden_client(self):
        with patch('store.get_garden_client') as mock_get_garden_client, \
             patch('store.CoreV1Api') as mock_core_v1_api, \
             patch('store.CustomObjectsApi') as mock_custom_objects_api:
            gardener_store = GardenerStore(logger=self.logger, store=self.store)

        api_client = mock_get_garden_client.return_value
        mock_core_v1_api.assert_called_once_with(api_client)
        mock_custom_objects_api.assert_called_once_with(api_client)
        self.assertIs(gardener_store.v1, mock_core_v1_api.return_value)

    def test_get_id(self):
        self.assertEqual(self.new_store().get_id(), 'gardener-dev')

        store = KubeconfigStore(kind='gardener', id='my-garden', config=self.store.config)
        self.assertEqual(self.new_store(store).get_id(), 'my-garden')

    def test_landscape_from_cluster_identity(self):
        store = KubeconfigStore(kind='gardener', config={'gardenerAPIKubeconfigPath': '/kube/garden.yaml'})
        self.mock_v1.read_namespaced_config_map.return_value.data = {'cluster-identity': 'live'}

        gardener_store = self.new_store(store)

        self.assertEqual(gardener_store.landscape, 'live')
        self.assertEqual(gardener_store.landscape, 'live')
        self.mock_v1.read_namespaced_config_map.assert_called_once()

    def test_search(self):
        self.mock_custom_objects_api.list_cluster_custom_object.side_effect = [
            {'items': [make_project('core', 'garden-core'), make_project('garden', 'garden')]},
            {'items': [
                make_shoot('cluster-1', 'garden-core'),
                make_shoot('aws', 'garden', {ANNOTATION_SHOOT_USE_AS_SEED: 'true'}),
                make_shoot('orphan', 'garden-deleted'),
            ]},
        ]

        with self.assertLogs(self.logger, level='WARNING') as cm:
            identifiers = self.new_store().search()

        self.assertListEqual(
            identifiers,
            [
                'dev-garden',
                'dev--shoot--core--cluster-1',
                'dev--shoot--garden--aws',
                'dev--seed--aws',
            ],
        )
        self.assertEqual(len(cm.output), 1)
        self.assertIn('garden-deleted/orphan', cm.output[0])

    def test_get_kubeconfig_for_shoot(self):
        self.mock_v1.list_namespaced_secret.return_value.items = [
            make_secret('cluster-1.kubeconfig', 'garden-core', owner_kind='Shoot', owner_name='cluster-1'),
        ]

        kubeconfig = self.new_store().get_kubeconfig_for_path('dev--shoot--core--cluster-1')

        self.assertEqual(kubeconfig, KUBECONFIG.encode())
        self.mock_v1.list_namespaced_secret.assert_called_once_with('garden-core')

    def test_get_kubeconfig_for_seed(self):
        self.mock_v1.list_namespaced_secret.return_value.items = [
            make_secret('aws.kubeconfig', 'garden', owner_kind='Shoot', owner_name='aws'),
        ]

        kubeconfig = self.new_store().get_kubeconfig_for_path('dev--seed--aws')

        self.assertEqual(kubeconfig, KUBECONFIG.encode())
        self.mock_v1.list_namespaced_secret.assert_called_once_with('garden')

    def test_get_kubeconfig_missing_secret(self):
        self.mock_v1.list_namespaced_secret.return_value.items = []

        with self.assertLogs(self.logger, level='WARNING'):
            self.assertIsNone(self.new_store().get_kubeconfig_for_path('dev--shoot--core--cluster-1'))

    def test_get_kubeconfig_other_landscape(self):
        with self.assertLogs(self.logger, level='WARNING'):
            self.assertIsNone(self.new_store().get_kubeconfig_for_path('live--shoot--core--cluster-1'))

        self.mock_v1.list_namespaced_secret.assert_not_called()

    def test_get_kubeconfig_malformed_path(self):
        with self.assertRaises(IdentifierParseError):
            self.new_store().get_kubeconfig_for_path('dev--other--core--cluster-1')

    def test_get_garden_kubeconfig(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, 'garden.yaml')
            with open(path, 'w') as f:
                f.write(KUBECONFIG)

            store = KubeconfigStore(
                kind='gardener',
                config={'gardenerAPIKubeconfigPath': path, 'landscapeName': 'dev'},
            )

            self.assertEqual(self.new_store(store).get_kubeconfig_for_path('dev-garden'), KUBECONFIG.encode())
