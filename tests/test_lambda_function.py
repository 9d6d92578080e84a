import unittest
from unittest import mock

import lambda_function


class TestHandler(unittest.TestCase):
    """Tests for the Lambda entry module."""

    @mock.patch('lambda_function.lambda_handler')
    def test_handler_delegates(self, mock_lambda_handler):
        """Test that the configured handler forwards event and context."""
        event = {'clusterName': 'prod'}
        context = object()

        result = lambda_function.handler(event, context)

        mock_lambda_handler.assert_called_once_with(event, context)
        self.assertIs(result, mock_lambda_handler.return_value)


if __name__ == '__main__':
    unittest.main()
