# settings used by testcore when running the test suite

# directory for xmlrunner report files
TEST_OUTPUT_DIR = 'test-results'
