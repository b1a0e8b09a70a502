class AppStatusCode:
    # Success
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    CREATED_SUCCESSFULLY = "101"
    UPDATED_SUCCESSFULLY = "102"

    # Client side
    REQUIRED_VALIDATION_ERROR = "201"
    NOT_FOUND = "202"

    # Store / write side
    OPERATION_FAILED = "300"
    OPERATION_ERROR = "301"
    PARTIAL_WRITE_ROLLED_BACK = "302"
